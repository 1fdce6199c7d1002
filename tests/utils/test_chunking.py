"""Tests for message chunking."""

import pytest

from utils.chunking import chunk_messages, pack_messages


class TestChunkMessages:
    def test_packs_small_blocks(self) -> None:
        assert chunk_messages(['aaaaa', 'bbbbb'], 11) == ['aaaaa\nbbbbb']

    def test_splits_at_post_boundary(self) -> None:
        assert chunk_messages(['aaaaa', 'bbbbb'], 10) == ['aaaaa', 'bbbbb']

    def test_content_preserved(self) -> None:
        blocks = [f"{n} Anon\nbody {n}\n" for n in range(50)]
        chunks = chunk_messages(blocks, 100)
        assert all(len(chunk) <= 100 for chunk in chunks)
        assert '\n'.join(chunks) == '\n'.join(blocks)

    def test_oversized_block_split_on_lines(self) -> None:
        block = '\n'.join(['x' * 6] * 4)
        chunks = chunk_messages([block], 13)
        assert chunks == ['xxxxxx\nxxxxxx', 'xxxxxx\nxxxxxx']

    def test_oversized_line_hard_cut(self) -> None:
        chunks = chunk_messages(['x' * 25], 10)
        assert [len(chunk) for chunk in chunks] == [10, 10, 5]

    def test_empty(self) -> None:
        assert chunk_messages([], 1800) == []

    def test_invalid_limit(self) -> None:
        with pytest.raises(ValueError):
            chunk_messages(['a'], 0)


class TestPackMessages:
    def test_completed_counts(self) -> None:
        packed = pack_messages(['aaaaa', 'bbbbb', 'ccccc'], 11)
        assert packed == [('aaaaa\nbbbbb', 2), ('ccccc', 3)]

    def test_split_block_counts_once_finished(self) -> None:
        block = '\n'.join(['x' * 6] * 4)
        packed = pack_messages(['a', block], 13)
        assert packed == [('a', 1), ('xxxxxx\nxxxxxx', 1), ('xxxxxx\nxxxxxx', 2)]

    def test_matches_chunk_messages(self) -> None:
        blocks = [f"{n} Anon\nbody {n}\n" for n in range(30)]
        assert [text for text, _ in pack_messages(blocks, 80)] == chunk_messages(blocks, 80)
