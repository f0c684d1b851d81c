"""Phone display helper: contacts keep whatever phone text was typed; the API adds an E.164 view."""

import phonenumbers

# The contact list was built for Brazilian numbers; override via CONTACTS_PHONE_REGION.
DEFAULT_PHONE_REGION = "BR"


def normalize_phone(raw: str | None, default_region: str | None = DEFAULT_PHONE_REGION) -> str | None:
    """Return an E.164 rendering of a contact's phone text for display, or None.

    None means the text is not a dialable number ("ask at reception", a bare extension);
    the contact keeps it as typed. Local numbers such as "(11) 98765-4321" are read in
    default_region; a leading + wins over the region.
    """
    text = "" if raw is None else str(raw).strip()
    if not text:
        return None
    try:
        number = phonenumbers.parse(text, default_region)
    except phonenumbers.NumberParseException:
        return None
    if not phonenumbers.is_valid_number(number):
        return None
    return phonenumbers.format_number(number, phonenumbers.PhoneNumberFormat.E164)
