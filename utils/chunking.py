"""
File: utils/chunking.py
Location: res_range_bot/utils/chunking.py
Purpose: Pack rendered posts into messages under the platform length limit
"""

def _split_block(block, limit):
    """
    Split one oversized block on line breaks, hard-cutting long lines

    Yields:
        str: Pieces no longer than limit
    """
    if len(block) <= limit:
        yield block
        return

    current = ''
    for line in block.split('\n'):
        while len(line) > limit:
            if current:
                yield current
                current = ''
            yield line[:limit]
            line = line[limit:]

        candidate = f"{current}\n{line}" if current else line
        if len(candidate) <= limit:
            current = candidate
        else:
            yield current
            current = line

    if current:
        yield current


def pack_messages(blocks, limit):
    """
    Pack text blocks into as few messages as possible

    Args:
        blocks: Rendered posts, in display order
        limit: Max characters per message

    Returns:
        list: (text, completed) pairs; completed is how many blocks have
        been sent in full once this message and every earlier one are out

    A post only spans messages when it is longer than limit on its own.
    """
    if limit <= 0:
        raise ValueError(f"limit must be positive, got {limit}")

    packed = []
    current = ''
    completed = 0

    for block in blocks:
        for piece in _split_block(block, limit):
            candidate = f"{current}\n{piece}" if current else piece
            if len(candidate) <= limit:
                current = candidate
            else:
                packed.append((current, completed))
                current = piece
        completed += 1

    if current:
        packed.append((current, completed))

    return packed


def chunk_messages(blocks, limit):
    """Message texts only, each <= limit (see pack_messages)"""
    return [text for text, _ in pack_messages(blocks, limit)]
