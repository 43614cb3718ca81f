DEFAULT_FILENAME = "index.html"
FILENAME_MARKER = "filename="


class FilenameError(ValueError):
    """Raised by a filename getter that cannot produce a name."""


def _is_header_text(value):
    # visible ASCII plus space and tab
    return all(c == "\t" or " " <= c <= "~" for c in value)


def filename_from_headers(response):
    """Get filename from content-disposition"""
    cd = response.headers.get("Content-Disposition")
    if cd is None:
        raise FilenameError("No Content-Disposition Header")
    if not _is_header_text(cd):
        raise FilenameError(f"Content-Disposition header is not valid text: {cd!r}")

    index = cd.rfind(FILENAME_MARKER)
    if index == -1 or not cd[index + len(FILENAME_MARKER):]:
        raise FilenameError(f"Couldn't read filename from Content-Disposition: {cd}")
    return cd[index + len(FILENAME_MARKER):]


def filename_from_uri(response):
    """Get filename from the last path segment of the final url"""
    uri = str(response.url)
    last_slash = uri.rfind("/")
    if last_slash == -1 or not uri[last_slash + 1:]:
        raise FilenameError(f"URI has no trailing filename '{uri}'")
    return uri[last_slash + 1:]


FILENAME_GETTERS = (filename_from_headers, filename_from_uri)


def resolve_filename(response, filename=None):
    """
    Pick the output filename for a response.

    An explicit filename always wins. Otherwise each getter in
    FILENAME_GETTERS is tried in order and the first name found is used;
    every getter that fails prints its reason. If none succeed the result
    is DEFAULT_FILENAME.
    """
    if filename is not None:
        return filename

    for getter in FILENAME_GETTERS:
        try:
            return getter(response)
        except FilenameError as e:
            print(e)

    return DEFAULT_FILENAME
