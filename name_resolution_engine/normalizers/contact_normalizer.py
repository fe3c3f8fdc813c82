import re
from typing import Optional, Tuple

NON_DIGIT_PATTERN = re.compile(r"\D")


def normalize_phone_number(phone: Optional[str]) -> str:
    if not phone:
        return ""
    digits = NON_DIGIT_PATTERN.sub("", str(phone))
    # drop the north american country code
    return re.sub(r"^1", "", digits)


def normalize_email(email: Optional[str]) -> str:
    if not email:
        return ""
    return str(email).strip().lower()


def split_full_name(full_name: Optional[str]) -> Tuple[str, str]:
    if not full_name or not full_name.strip():
        return "", ""
    parts = full_name.split()
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[-1]
