"""Error taxonomy and basic catalog tests."""

from __future__ import annotations

import unittest

from service_errors.domain.basic_errors import (
    data_access_forbidden,
    data_access_unauthorized,
    data_not_found,
    invalid_format,
)
from service_errors.errors import (
    BasicErrorCode,
    ErrorWithParameters,
    FunctionalCode,
    FunctionalError,
    TechnicalCode,
    TechnicalError,
    TechnicalErrorType,
)


class FunctionalErrorTests(unittest.TestCase):
    def test_code_only_error_has_no_message_fragment(self) -> None:
        error = FunctionalError(BasicErrorCode.NOT_FOUND)

        self.assertEqual(str(error), "FunctionalError [code=NOT_FOUND]")
        self.assertIsNone(error.message)
        self.assertIsNone(error.message_template)
        self.assertIsNone(error.parameters)
        self.assertIsNone(error.cause)

    def test_message_is_rendered_once_at_construction(self) -> None:
        error = FunctionalError(BasicErrorCode.INVALID_FORMAT, "{} must be between {} and {}", "lastname", 1, 30)

        self.assertEqual(error.message, "lastname must be between 1 and 30")
        self.assertEqual(error.args, ("lastname must be between 1 and 30",))
        self.assertEqual(error.message_template, "{} must be between {} and {}")
        self.assertEqual(error.parameters, ("lastname", 1, 30))

    def test_diagnostic_string_shows_template_then_parameters(self) -> None:
        error = FunctionalError("BANK_ACCOUNT_BANNED", "IBAN {} is banned (order {}).", "FR76300", "123456")

        self.assertEqual(
            str(error),
            "FunctionalError [code=BANK_ACCOUNT_BANNED, message=IBAN {} is banned (order {})., "
            "parameters=[FR76300, 123456]]",
        )
        self.assertEqual(repr(error), str(error))

    def test_message_without_parameters_is_kept_raw(self) -> None:
        error = FunctionalError(BasicErrorCode.FORBIDDEN, "placeholder {} stays")

        self.assertEqual(error.message, "placeholder {} stays")
        self.assertIsNone(error.parameters)
        self.assertEqual(str(error), "FunctionalError [code=FORBIDDEN, message=placeholder {} stays]")

    def test_parameters_without_message_render_nothing(self) -> None:
        error = FunctionalError(BasicErrorCode.FORBIDDEN, None, "ignored")

        self.assertIsNone(error.message)
        self.assertEqual(error.parameters, ("ignored",))
        self.assertEqual(str(error), "FunctionalError [code=FORBIDDEN, parameters=[ignored]]")

    def test_string_code_becomes_custom_functional_code(self) -> None:
        error = FunctionalError("NOT_FOUND")

        self.assertEqual(error.code, FunctionalCode("NOT_FOUND"))
        self.assertIsNot(error.code, BasicErrorCode.NOT_FOUND)
        self.assertEqual(error.code.name, "NOT_FOUND")

    def test_missing_code_is_rejected(self) -> None:
        with self.assertRaises(TypeError):
            FunctionalError(None)  # type: ignore[arg-type]

    def test_cause_is_chained(self) -> None:
        cause = KeyError("customer")
        error = FunctionalError(BasicErrorCode.NOT_FOUND, "Customer {} is unknown.", "007", cause=cause)

        self.assertIs(error.cause, cause)
        self.assertIs(error.__cause__, cause)

    def test_fields_are_read_only(self) -> None:
        error = FunctionalError(BasicErrorCode.NOT_FOUND, "x {}", "y")
        for attribute in ("code", "message", "message_template", "parameters", "cause"):
            with self.subTest(attribute=attribute):
                with self.assertRaises(AttributeError):
                    setattr(error, attribute, None)

    def test_is_an_exception_with_parameters(self) -> None:
        self.assertIsInstance(FunctionalError(BasicErrorCode.NOT_FOUND), ErrorWithParameters)
        self.assertIsInstance(FunctionalError(BasicErrorCode.NOT_FOUND), Exception)


class TechnicalErrorTests(unittest.TestCase):
    def test_defaults_to_fatal_without_code(self) -> None:
        error = TechnicalError("Cannot read file {}.", "/tmp/cac40_tips.json")

        self.assertIs(error.error_type, TechnicalErrorType.FATAL)
        self.assertFalse(error.is_retriable)
        self.assertIsNone(error.code)
        self.assertEqual(error.message, "Cannot read file /tmp/cac40_tips.json.")
        self.assertEqual(
            str(error),
            "TechnicalError [message=Cannot read file {}., parameters=[/tmp/cac40_tips.json], type=FATAL]",
        )

    def test_cause_only_error(self) -> None:
        cause = OSError("disk")
        error = TechnicalError(cause=cause)

        self.assertIs(error.cause, cause)
        self.assertIs(error.__cause__, cause)
        self.assertIsNone(error.message)
        self.assertEqual(str(error), "TechnicalError [type=FATAL]")

    def test_full_diagnostic_string_field_order(self) -> None:
        error = TechnicalError(
            "Database {} unreachable after {} attempts",
            "orders",
            3,
            code="DATABASE_UNREACHABLE",
            error_type=TechnicalErrorType.RETRIABLE,
        )

        self.assertTrue(error.is_retriable)
        self.assertEqual(error.code, TechnicalCode("DATABASE_UNREACHABLE"))
        self.assertEqual(
            str(error),
            "TechnicalError [code=DATABASE_UNREACHABLE, message=Database {} unreachable after {} attempts, "
            "parameters=[orders, 3], type=RETRIABLE]",
        )

    def test_code_spaces_are_distinct(self) -> None:
        self.assertNotEqual(TechnicalCode("SAME"), FunctionalCode("SAME"))

    def test_error_type_given_as_text_is_coerced(self) -> None:
        error = TechnicalError("boom", error_type="RETRIABLE")

        self.assertIs(error.error_type, TechnicalErrorType.RETRIABLE)
        self.assertTrue(error.is_retriable)
        self.assertEqual(str(error), "TechnicalError [message=boom, type=RETRIABLE]")

    def test_unknown_error_type_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            TechnicalError("boom", error_type="SOMETIMES")


class ErrorWithParametersTests(unittest.TestCase):
    def test_base_class_cannot_be_raised_directly(self) -> None:
        with self.assertRaises(TypeError):
            ErrorWithParameters(None, "orphan {}", ("x",))

    def test_subclass_without_own_fields_keeps_diagnostic_format(self) -> None:
        class _QuotaError(ErrorWithParameters):
            _kind = "QuotaError"

            def __init__(self, message: str, *parameters: object) -> None:
                super().__init__(None, message, parameters)

        self.assertEqual(
            str(_QuotaError("quota {} reached", "user-7")),
            "QuotaError [message=quota {} reached, parameters=[user-7]]",
        )

    def test_diagnostic_string_survives_a_cleared_functional_code(self) -> None:
        error = FunctionalError(BasicErrorCode.NOT_FOUND, "gone")
        error._code = None  # type: ignore[assignment]

        self.assertEqual(str(error), "FunctionalError [code=None, message=gone]")


class BasicCatalogTests(unittest.TestCase):
    _FACTORIES = (
        (data_not_found, BasicErrorCode.NOT_FOUND),
        (invalid_format, BasicErrorCode.INVALID_FORMAT),
        (data_access_forbidden, BasicErrorCode.FORBIDDEN),
        (data_access_unauthorized, BasicErrorCode.UNAUTHORIZED),
    )

    def test_no_argument_factories_fix_the_code(self) -> None:
        for factory, code in self._FACTORIES:
            with self.subTest(code=code):
                error = factory()
                self.assertIsInstance(error, FunctionalError)
                self.assertIs(error.code, code)
                self.assertIsNone(error.message)
                self.assertEqual(str(error), str(FunctionalError(code)))

    def test_templated_factories_render_like_a_generic_functional_error(self) -> None:
        for factory, code in self._FACTORIES:
            with self.subTest(code=code):
                error = factory("Customer {} is unknown.", "007")
                generic = FunctionalError(code, "Customer {} is unknown.", "007")
                self.assertEqual(error.message, "Customer 007 is unknown.")
                self.assertEqual(str(error), str(generic))

    def test_factories_accept_a_cause(self) -> None:
        cause = LookupError("row")
        for factory, code in self._FACTORIES:
            with self.subTest(code=code):
                error = factory("Row {} missing", 12, cause=cause)
                self.assertIs(error.cause, cause)
                self.assertEqual(error.parameters, (12,))


if __name__ == "__main__":
    unittest.main()
