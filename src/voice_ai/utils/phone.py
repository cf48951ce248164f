"""Phone number helpers shared by the vendor call mappers."""

import phonenumbers


def format_phone_number(phone_number: str, default_region: str = "US") -> str:
    """
    Format a phone number to E.164.

    Numbers without a country code are parsed against ``default_region``.
    Anything that does not parse to a valid number is returned unchanged so
    the vendor API gets the final say.

    Args:
        phone_number: Phone number string in any format
        default_region: ISO region used when the number has no country code

    Returns:
        str: E.164 formatted phone number (e.g., +15551234567) or the input
    """
    try:
        parsed = phonenumbers.parse(phone_number, default_region)
        if phonenumbers.is_valid_number(parsed):
            return phonenumbers.format_number(
                parsed, phonenumbers.PhoneNumberFormat.E164
            )

        parsed = phonenumbers.parse(phone_number, None)
        if phonenumbers.is_valid_number(parsed):
            return phonenumbers.format_number(
                parsed, phonenumbers.PhoneNumberFormat.E164
            )
    except phonenumbers.NumberParseException:
        pass

    return phone_number
