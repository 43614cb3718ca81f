import requests
from tqdm import tqdm

from webget.config import Settings
from webget.filename import resolve_filename
from webget.utils import human_bytes

SCHEMES = ("http://", "https://")
BAR_FORMAT = "{desc}[{elapsed}] [{bar:40}] {n_fmt}/{total_fmt} ({remaining})"


def normalize_uri(uri):
    if uri.startswith(SCHEMES):
        return uri
    return f"http://{uri}"


def get_content_length(response):
    """Declared size of the body in bytes, 0 when unknown"""
    try:
        return int(response.headers.get("content-length", 0))
    except ValueError:
        return 0


def download(uri, filename=None, settings=None):
    """
    Download ``uri`` into the current directory.

    Returns the name of the written file, or None if the request itself
    failed. Errors opening or writing the destination file, and errors
    reading the body once the transfer has started, are not caught here.
    """
    settings = settings or Settings()
    uri = normalize_uri(uri)

    # write the body exactly as the server declared it, no gzip/deflate
    headers = {"Accept-Encoding": "identity"}
    if settings.user_agent:
        headers["User-Agent"] = settings.user_agent

    print(f"Sending request to '{uri}'")
    try:
        # stream=True keeps the body out of memory until we iterate it
        r = requests.get(uri, stream=True, headers=headers, timeout=settings.timeout)
    except requests.exceptions.RequestException as e:
        print(f"Failed to GET URI: '{uri}' ({e})")
        return None

    with r:
        filename = resolve_filename(r, filename)
        print(f"Filename set to: '{filename}'")

        with open(filename, "wb") as f:
            n_bytes = get_content_length(r)
            if n_bytes:
                print(f"Download size is: {human_bytes(n_bytes)}")
            else:
                print("No size for download found")

            with tqdm(
                total=n_bytes or None,
                unit="B",
                unit_scale=True,
                unit_divisor=1024,
                bar_format=BAR_FORMAT,
            ) as pbar:
                for chunk in r.iter_content(chunk_size=settings.chunk_size):
                    if chunk:
                        f.write(chunk)
                        pbar.update(len(chunk))
                pbar.set_description_str("downloaded ")

    return filename
