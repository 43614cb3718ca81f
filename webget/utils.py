UNITS = ["KiB", "MiB", "GiB", "TiB", "PiB", "EiB"]


def human_bytes(n_bytes):
    """Format a byte count with binary units, e.g. 1.20 MiB"""
    if n_bytes < 1024:
        return f"{n_bytes} B"
    size = float(n_bytes)
    for unit in UNITS:
        size /= 1024
        if size < 1024 or unit == UNITS[-1]:
            return f"{size:.2f} {unit}"
