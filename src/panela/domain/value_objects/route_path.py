"""Route path normalization and segment-wise prefix matching."""

ROOT = "/"


def normalize_route_path(path: str) -> str:
    """Return path with a leading slash, no trailing slash, no query or fragment.

    Repeated slashes are collapsed. An empty path normalizes to "/".
    """
    for sep in ("?", "#"):
        path = path.split(sep, 1)[0]
    segments = [s for s in path.strip().split("/") if s]
    return ROOT + "/".join(segments)


def route_segments(path: str) -> tuple[str, ...]:
    """Split a normalized path into its segments. "/" has none."""
    return tuple(s for s in path.split("/") if s)


def is_route_prefix(prefix: str, path: str) -> bool:
    """True if prefix covers path segment by segment.

    "/dashboard/sales" covers "/dashboard/sales" and "/dashboard/sales/42",
    not "/dashboard/salesforce".
    """
    prefix_segments = route_segments(prefix)
    return route_segments(path)[: len(prefix_segments)] == prefix_segments
