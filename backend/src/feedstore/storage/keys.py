# Longest file name most filesystems accept, in bytes.
NAME_MAX = 255


def sanitize_title(title: str) -> str:
    """Derive an item key from its title: letters and decimal digits only.

    The mapping is lossy, so distinct titles such as ``"Hello!"`` and
    ``"He-llo"`` share the key ``"Hello"``.
    """
    return "".join(char for char in title if char.isalpha() or char.isdecimal())


def fits_name_max(name: str) -> bool:
    return len(name.encode("utf-8", errors="surrogatepass")) <= NAME_MAX


def is_valid_name(name: str) -> bool:
    """Whether *name* can be used as a single path component under the base path."""
    if not name or name.startswith(".") or not fits_name_max(name):
        return False
    return not any(sep in name for sep in ("/", "\\", "\x00"))
