"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and documents every error case in one place.
    """

    # ------------------------------------------------------------------
    # Currency
    # ------------------------------------------------------------------

    @staticmethod
    def currency_mismatch(first_code: str, second_code: str) -> Diagnostic:
        """Two amounts in different currencies were combined or compared.

        Args:
            first_code: Currency code of the receiver
            second_code: Currency code of the argument

        Returns:
            Diagnostic for CURRENCY_MISMATCH
        """
        msg = f"Currencies differ: {first_code}/{second_code}"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_MISMATCH,
            message=msg,
            hint="Convert one amount with converted_to() before combining them",
        )

    @staticmethod
    def currency_unknown(currency_code: str) -> Diagnostic:
        """Currency code not found in the registry.

        Args:
            currency_code: The code that was looked up

        Returns:
            Diagnostic for CURRENCY_UNKNOWN
        """
        msg = f"Unknown currency '{currency_code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_UNKNOWN,
            message=msg,
            hint="Use an ISO 4217 code or register the currency first",
        )

    @staticmethod
    def currency_numeric_unknown(numeric_code: int | str) -> Diagnostic:
        """Numeric currency code not found in the registry."""
        msg = f"Unknown currency numeric code '{numeric_code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_NUMERIC_UNKNOWN,
            message=msg,
            hint="Numeric codes are ISO 4217 values between 0 and 999",
        )

    @staticmethod
    def currency_country_unknown(territory: str) -> Diagnostic:
        """No registered currency is in use in the given territory."""
        msg = f"No currency found for country '{territory}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_COUNTRY_UNKNOWN,
            message=msg,
            hint="Pass an ISO 3166 alpha-2 territory code such as 'US' or 'DE'",
        )

    @staticmethod
    def currency_code_invalid(currency_code: str) -> Diagnostic:
        """Currency code is not three uppercase ASCII letters."""
        msg = f"Invalid currency code '{currency_code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_CODE_INVALID,
            message=msg,
            hint="Currency codes are three uppercase letters, e.g. 'USD'",
        )

    @staticmethod
    def currency_already_registered(currency_code: str) -> Diagnostic:
        """Registration would replace an existing currency.

        Args:
            currency_code: Code (or numeric code) already present

        Returns:
            Diagnostic for CURRENCY_ALREADY_REGISTERED
        """
        msg = f"Currency already registered: '{currency_code}'"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_ALREADY_REGISTERED,
            message=msg,
            hint="Pass force=True to replace the existing registration",
        )

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    @staticmethod
    def rounding_necessary(scale: int) -> Diagnostic:
        """Reducing the scale would discard nonzero digits.

        Args:
            scale: Requested scale

        Returns:
            Diagnostic for ROUNDING_NECESSARY
        """
        msg = f"Rounding necessary: result cannot be represented exactly at scale {scale}"
        return Diagnostic(
            code=DiagnosticCode.ROUNDING_NECESSARY,
            message=msg,
            hint="Pass a rounding mode other than RoundingMode.UNNECESSARY",
        )

    @staticmethod
    def invalid_argument(argument_name: str, reason: str) -> Diagnostic:
        """Generic invalid argument.

        Args:
            argument_name: Name of the offending parameter
            reason: Short description of the problem

        Returns:
            Diagnostic for INVALID_ARGUMENT
        """
        msg = f"Invalid argument '{argument_name}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ARGUMENT,
            message=msg,
            argument_name=argument_name,
        )

    @staticmethod
    def scale_negative(scale: int) -> Diagnostic:
        """Scale below zero."""
        msg = f"Scale must be zero or positive, got {scale}"
        return Diagnostic(
            code=DiagnosticCode.SCALE_NEGATIVE,
            message=msg,
            argument_name="scale",
        )

    @staticmethod
    def scale_mismatch(currency_code: str, scale: int, expected: int) -> Diagnostic:
        """Money built from a value whose scale differs from the currency scale."""
        msg = f"Scale of {currency_code} amount is {scale}, expected {expected}"
        return Diagnostic(
            code=DiagnosticCode.SCALE_MISMATCH,
            message=msg,
            hint="Use with_currency_scale() or BigMoney for arbitrary scales",
        )

    @staticmethod
    def conversion_rate_invalid(rate: str) -> Diagnostic:
        """Conversion rate zero or negative."""
        msg = f"Conversion rate must be positive, got {rate}"
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_RATE_INVALID,
            message=msg,
            argument_name="conversion_rate",
        )

    @staticmethod
    def conversion_same_currency(currency_code: str) -> Diagnostic:
        """Conversion to the currency the amount already has."""
        msg = f"Cannot convert {currency_code} to itself"
        return Diagnostic(
            code=DiagnosticCode.CONVERSION_SAME_CURRENCY,
            message=msg,
            hint="Use multiplied_by() to scale an amount within one currency",
        )

    @staticmethod
    def division_by_zero() -> Diagnostic:
        """Division by a zero divisor."""
        return Diagnostic(
            code=DiagnosticCode.DIVISION_BY_ZERO,
            message="Division by zero",
            argument_name="divisor",
        )

    @staticmethod
    def amount_invalid(value: object) -> Diagnostic:
        """Amount is not a finite decimal number.

        Args:
            value: The rejected input

        Returns:
            Diagnostic for AMOUNT_INVALID
        """
        msg = f"Invalid amount {value!r}"
        return Diagnostic(
            code=DiagnosticCode.AMOUNT_INVALID,
            message=msg,
            hint="Amounts must be Decimal, int, str or finite float values",
        )

    @staticmethod
    def amount_exponent_too_large(exponent: int, limit: int) -> Diagnostic:
        """Decimal exponent would expand into an oversized int."""
        msg = f"Amount exponent {exponent} exceeds the limit of {limit}"
        return Diagnostic(
            code=DiagnosticCode.AMOUNT_EXPONENT_TOO_LARGE,
            message=msg,
            hint="Write the amount with a smaller exponent",
        )

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    @staticmethod
    def not_a_printer() -> Diagnostic:
        """Formatter contains an element that cannot print."""
        return Diagnostic(
            code=DiagnosticCode.NOT_A_PRINTER,
            message="MoneyFormatter has not been configured to be able to print",
        )

    @staticmethod
    def not_a_parser() -> Diagnostic:
        """Formatter contains an element that cannot parse."""
        return Diagnostic(
            code=DiagnosticCode.NOT_A_PARSER,
            message="MoneyFormatter has not been configured to be able to parse",
            hint="Localized currency symbols are print-only; use a currency code",
        )

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Locale not recognized by Babel."""
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            argument_name="locale",
            hint="Use a CLDR locale identifier such as 'en_US' or 'de-DE'",
        )

    @staticmethod
    def style_invalid(field: str, value: object) -> Diagnostic:
        """MoneyAmountStyle field with an invalid value."""
        msg = f"Invalid amount style {field}: {value!r}"
        return Diagnostic(
            code=DiagnosticCode.STYLE_INVALID,
            message=msg,
            argument_name=field,
        )

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @staticmethod
    def parse_failed(text: str, index: int) -> Diagnostic:
        """Text did not match the formatter at the given index.

        Args:
            text: Full input text
            index: Index of the first character that could not be parsed

        Returns:
            Diagnostic for PARSE_FAILED
        """
        msg = f"Text could not be parsed at index {index}: '{text}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_FAILED,
            message=msg,
            span=SourceSpan(start=index, end=index),
            hint="Check that the text matches the formatter pattern",
        )

    @staticmethod
    def parse_incomplete(text: str, index: int) -> Diagnostic:
        """Text had unparsed characters after the last element."""
        msg = f"Unparsed text found at index {index}: '{text}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INCOMPLETE,
            message=msg,
            span=SourceSpan(start=index, end=len(text)),
        )

    @staticmethod
    def parse_missing_currency(text: str) -> Diagnostic:
        """Parse succeeded but no element produced a currency."""
        msg = f"Parsing did not find a currency: '{text}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_MISSING_CURRENCY,
            message=msg,
            hint="Add a currency code element to the formatter",
        )

    @staticmethod
    def parse_missing_amount(text: str) -> Diagnostic:
        """Parse succeeded but no element produced an amount."""
        msg = f"Parsing did not find an amount: '{text}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_MISSING_AMOUNT,
            message=msg,
            hint="Add an amount element to the formatter",
        )

    @staticmethod
    def money_string_invalid(text: str) -> Diagnostic:
        """String is not of the form 'CCC amount'."""
        msg = f"Money '{text}' cannot be parsed"
        return Diagnostic(
            code=DiagnosticCode.PARSE_MONEY_STRING_INVALID,
            message=msg,
            hint="Expected a currency code, a space and an amount, e.g. 'USD 12.34'",
        )
