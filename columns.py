def column_index(label: str) -> int:
    """
    Convert a spreadsheet column label to a zero-based index.

    Letters are bijective base-26 digits (A=1 .. Z=26), so
    "A" -> 0, "Z" -> 25, "AA" -> 26, "AZ" -> 51.
    Labels must be uppercase A-Z; anything else gives a meaningless result.
    """
    index = 0
    for ch in label:
        index = index * 26 + (ord(ch) - ord('A') + 1)
    return index - 1
