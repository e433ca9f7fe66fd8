from utils import constants


def truncate(text, max_len, marker=constants.ELLIPSIS):
    """
    Cuts *text* down to exactly *max_len* characters and appends *marker* if anything was removed.
    Text that already fits is returned unchanged.
    """
    if len(text) <= max_len:
        return text
    return f"{text[:max_len]}{marker}"
