from typing import Any, Callable, Dict

from netveil.exceptions import ScrubbedKeyCollisionError


def scrub_structure(data: Any, scrub: Callable[[str], str]) -> Any:
    """
    Recursively walk a JSON-like structure and scrub every string in it.

    Dict keys are scrubbed as well as values, since addresses frequently
    show up as keys (per-host maps, ARP tables). Non-string scalars are
    returned unchanged.

    Raises:
        ScrubbedKeyCollisionError: if two keys of one dict scrub to the same
            key (static replacements, or two spellings of one address).
    """
    if isinstance(data, dict):
        scrubbed: Dict[Any, Any] = {}
        origins: Dict[Any, Any] = {}
        for key, value in data.items():
            new_key = scrub_structure(key, scrub)
            if new_key in scrubbed:
                raise ScrubbedKeyCollisionError(origins[new_key], key, new_key)
            origins[new_key] = key
            scrubbed[new_key] = scrub_structure(value, scrub)
        return scrubbed
    elif isinstance(data, list):
        return [scrub_structure(item, scrub) for item in data]
    elif isinstance(data, str):
        return scrub(data)
    else:
        return data
