import secrets


def generate_code(length: int = 6, characters: str = "0123456789") -> str:
    if length <= 0 or not characters:
        raise ValueError("code length and characters must be non-empty")
    return "".join(secrets.choice(characters) for _ in range(length))
