import html


def highlight_matches(text: str, indices: list[tuple[int, int]], tag: str = "mark") -> str:
    """Wrap each inclusive (start, end) range of text in <mark>...</mark>, escaping the rest."""
    if not indices:
        return html.escape(text)

    parts = []
    last = 0
    for start, end in sorted(indices):
        if start < last:
            start = last  # overlapping range, keep what is left of it
        if start > end:
            continue
        parts.append(html.escape(text[last:start]))
        parts.append(f"<{tag}>{html.escape(text[start:end + 1])}</{tag}>")
        last = end + 1
    parts.append(html.escape(text[last:]))
    return "".join(parts)
