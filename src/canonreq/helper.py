def find_version():
    from importlib.metadata import version, PackageNotFoundError

    try:
        return version("canonreq")
    except PackageNotFoundError:
        return "dev"


def shorten_text(x, width=30):
    return (x[:width] + "...") if len(x) > width else x


def format_headers(headers):
    headers = [f"{k}: {v}" for k, v in sorted(headers.items())]
    return "\n".join(headers)


def parse_header_line(line):
    """Parse 'Name: value' into a (name, value) pair"""
    name, sep, value = line.partition(":")
    if not sep:
        raise ValueError(f"invalid header {line!r}, expect 'Name: value'")
    return name.strip(), value.strip()
