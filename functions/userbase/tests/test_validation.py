import unittest

from userbase.validation import (
    MISSING,
    USER_SCHEMA,
    FieldRule,
    InvalidFieldType,
    MissingRequiredField,
    ValidationError,
    validate_field,
    validate_user_name,
    validate_user_record,
)

SAMPLE_NAMES = ["Alice", "bob", "Zoë", "O'Neil", "李雷", "x", "Jean-Luc Picard"]


class ValidateUserNameTests(unittest.TestCase):
    def test_trims_surrounding_whitespace(self):
        self.assertEqual(validate_user_name("  Alice  "), "Alice")

    def test_keeps_inner_whitespace(self):
        self.assertEqual(validate_user_name("\tJean-Luc Picard\n"), "Jean-Luc Picard")

    def test_names_without_whitespace_are_unchanged(self):
        for name in ["Alice", "bob", "Zoë", "O'Neil", "李雷", "x"]:
            with self.subTest(name=name):
                self.assertEqual(validate_user_name(name), name)

    def test_padding_does_not_change_result(self):
        for name in SAMPLE_NAMES:
            with self.subTest(name=name):
                self.assertEqual(
                    validate_user_name("  " + name + "  "), validate_user_name(name)
                )

    def test_trimming_is_idempotent(self):
        for name in SAMPLE_NAMES:
            with self.subTest(name=name):
                once = validate_user_name(" \n" + name + " ")
                self.assertEqual(validate_user_name(once), once)

    def test_absent_is_missing(self):
        with self.assertRaises(MissingRequiredField) as ctx:
            validate_user_name()
        self.assertEqual(ctx.exception.field, "name")

        with self.assertRaises(MissingRequiredField):
            validate_user_name(MISSING)

    def test_none_is_missing(self):
        with self.assertRaises(MissingRequiredField):
            validate_user_name(None)

    def test_empty_and_blank_are_missing(self):
        for value in ["", "   ", "\t\n "]:
            with self.subTest(value=value):
                with self.assertRaises(MissingRequiredField) as ctx:
                    validate_user_name(value)
                self.assertEqual(ctx.exception.field, "name")

    def test_byte_order_mark_only_is_missing(self):
        for value in ["\ufeff", " \ufeff\u3000", "\u00a0\u2028"]:
            with self.subTest(value=value):
                with self.assertRaises(MissingRequiredField):
                    validate_user_name(value)

    def test_byte_order_mark_is_trimmed(self):
        self.assertEqual(validate_user_name("\ufeffAlice\u202f"), "Alice")

    def test_separator_controls_are_kept(self):
        for value in ["\x1fAlice", "\x1cAlice", "Alice\x85"]:
            with self.subTest(value=value):
                self.assertEqual(validate_user_name(value), value)

    def test_non_string_is_invalid_type(self):
        for value in [42, 3.5, True, ["Alice"], {"name": "Alice"}, b"Alice"]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidFieldType) as ctx:
                    validate_user_name(value)
                self.assertEqual(ctx.exception.field, "name")
                self.assertEqual(ctx.exception.expected, "str")

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            validate_user_name("")

    def test_error_as_dict(self):
        try:
            validate_user_name("")
        except ValidationError as e:
            self.assertEqual(
                e.as_dict(),
                {
                    "error": "MissingRequiredField",
                    "field": "name",
                    "message": "Field 'name' is required.",
                },
            )
        else:
            self.fail("expected MissingRequiredField")


class SchemaTests(unittest.TestCase):
    def test_user_schema_declares_name(self):
        self.assertEqual([rule.name for rule in USER_SCHEMA], ["name"])
        rule = USER_SCHEMA[0]
        self.assertIs(rule.value_type, str)
        self.assertTrue(rule.required)
        self.assertTrue(rule.trim)

    def test_optional_field_allows_absence(self):
        rule = FieldRule("nickname", required=False)
        self.assertIsNone(validate_field(rule, MISSING))
        self.assertEqual(validate_field(rule, ""), "")

    def test_untrimmed_field_keeps_whitespace(self):
        rule = FieldRule("bio", trim=False)
        self.assertEqual(validate_field(rule, "  hi  "), "  hi  ")

    def test_validate_user_record(self):
        self.assertEqual(validate_user_record({"name": " Alice "}), {"name": "Alice"})

    def test_validate_user_record_drops_unknown_keys(self):
        record = validate_user_record({"name": "Alice", "email": "a@example.com"})
        self.assertEqual(record, {"name": "Alice"})

    def test_validate_user_record_missing_name(self):
        with self.assertRaises(MissingRequiredField):
            validate_user_record({})

    def test_validate_user_record_rejects_non_mapping(self):
        with self.assertRaises(InvalidFieldType):
            validate_user_record(["Alice"])


if __name__ == "__main__":
    unittest.main()
