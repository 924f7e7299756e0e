from typing import Dict, List, Tuple

TagOptions = Dict[str, str]


def split_tag(raw: str) -> List[str]:
    # Commas inside values (e.g. a pattern like ^a{1,3}$) are not escapable
    # and will split the token.
    return [
        token.strip() for token in raw.split(",") if token.strip()
    ]


def parse_tag(raw: str) -> TagOptions:
    options: TagOptions = {}
    if not raw:
        return options

    for token in split_tag(raw):
        key, sep, value = token.partition("=")

        if sep:
            options[key.strip()] = value.strip()

        else:
            options[token] = "true"

    return options


def has_option(raw: str, key: str) -> bool:
    return any(
        token == key or token.startswith(f"{key}=")
        for token in split_tag(raw)
    )


def options_with_prefix(options: TagOptions, prefix: str) -> List[Tuple[str, str]]:
    return [
        (key[len(prefix):], value)
        for key, value in options.items()
        if key.startswith(prefix)
    ]
