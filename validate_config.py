"""
Startup Configuration Validator
Checks critical configuration before app starts and provides helpful error messages
"""
import os
import sys
from dotenv import load_dotenv

PLACEHOLDER_MARKERS = ('your_', 'example', 'here', 'change-this')


def validate_configuration():
    """Validate all critical configuration and return (errors, warnings)."""
    errors = []
    warnings = []

    gemini_key = os.getenv('GEMINI_API_KEY', '')
    if not gemini_key:
        errors.append(
            "❌ GEMINI_API_KEY is not set!\n"
            "   Every generation request will fail until it is configured.\n"
            "   Get a key from https://aistudio.google.com/app/apikey and add it to .env"
        )
    elif any(marker in gemini_key.lower() for marker in PLACEHOLDER_MARKERS):
        errors.append(
            "❌ GEMINI_API_KEY contains placeholder value!\n"
            "   Replace with actual API key from https://aistudio.google.com/app/apikey"
        )

    if not os.getenv('CLIENT_ORIGIN', ''):
        warnings.append(
            "⚠️  CLIENT_ORIGIN not set in .env\n"
            "   The API will accept cross-origin requests from any site.\n"
            "   Set it to the URL of the web client, e.g. http://localhost:5173"
        )

    raw_timeout = os.getenv('GEMINI_TIMEOUT_SECONDS', '')
    if raw_timeout:
        try:
            if float(raw_timeout) <= 0:
                raise ValueError(raw_timeout)
        except ValueError:
            errors.append(
                f"❌ GEMINI_TIMEOUT_SECONDS must be a positive number (got '{raw_timeout}')"
            )

    return errors, warnings


def print_validation_results():
    """Print validation results and return False if critical errors were found."""
    print("=" * 70)
    print("Questify Configuration Validation")
    print("=" * 70)
    print()

    errors, warnings = validate_configuration()

    if warnings:
        print("WARNINGS:")
        print("-" * 70)
        for warning in warnings:
            print(warning)
            print()

    if errors:
        print("CRITICAL ERRORS:")
        print("-" * 70)
        for error in errors:
            print(error)
            print()

        print("=" * 70)
        print("❌ Configuration validation FAILED!")
        print("=" * 70)
        print()
        return False

    print("=" * 70)
    if warnings:
        print("⚠️  Configuration validation completed with WARNINGS")
    else:
        print("✅ Configuration validation PASSED!")
    print("=" * 70)
    print()
    return True


if __name__ == '__main__':
    load_dotenv()
    success = print_validation_results()
    sys.exit(0 if success else 1)
