def normalize_gender(value: str) -> str:
    return value.strip().lower()


def genders_match(requester_gender: str, listing_gender: str) -> bool:
    return normalize_gender(requester_gender) == normalize_gender(listing_gender)
