# -*- coding: utf-8 -*-
"""Test cases for the peer index."""
import threading
import unittest

from parameterized import parameterized

from sudokugen.common.grid import InvalidSizeError
from sudokugen.common.peers import PeerIndex, get_peer_index


class TestPeerIndex(unittest.TestCase):
    def setUp(self):
        self.index = PeerIndex()

    @parameterized.expand([(4, 7), (9, 20), (16, 39)])
    def test_peer_count(self, size, expected):
        for cell in (0, size * size // 2, size * size - 1):
            with self.subTest(cell=cell):
                self.assertEqual(len(self.index.peers(size, cell)), expected)

    def test_center_cell_peers(self):
        # row 4, column 4, middle box
        expected = sorted(
            set(range(36, 45))
            | set(range(4, 81, 9))
            | {30, 31, 32, 39, 40, 41, 48, 49, 50}
        )
        expected.remove(40)
        self.assertEqual(self.index.peers(9, 40), tuple(expected))

    @parameterized.expand([(4,), (9,)])
    def test_symmetric_and_irreflexive(self, size):
        cells = range(size * size)
        for c1 in cells:
            peers = set(self.index.peers(size, c1))
            self.assertNotIn(c1, peers)
            self.assertFalse(PeerIndex.is_peer(size, c1, c1))
            for c2 in cells:
                self.assertEqual(PeerIndex.is_peer(size, c1, c2), PeerIndex.is_peer(size, c2, c1))
                self.assertEqual(c2 in peers, PeerIndex.is_peer(size, c1, c2))

    def test_memoized(self):
        first = self.index.peers(9, 40)
        self.assertEqual(self.index.compute_count, 1)
        second = self.index.peers(9, 40)
        self.assertEqual(first, second)
        self.assertIs(first, second)
        self.assertEqual(self.index.compute_count, 1)
        self.assertEqual(len(self.index), 1)

    def test_cache_keyed_by_size(self):
        self.index.peers(4, 0)
        self.index.peers(9, 0)
        self.assertEqual(self.index.compute_count, 2)
        self.assertNotEqual(self.index.peers(4, 0), self.index.peers(9, 0))

    def test_clear(self):
        self.index.peers(9, 0)
        self.index.clear()
        self.assertEqual(len(self.index), 0)
        self.assertEqual(self.index.compute_count, 0)
        self.index.peers(9, 0)
        self.assertEqual(self.index.compute_count, 1)

    def test_out_of_range(self):
        with self.assertRaises(IndexError):
            self.index.peers(4, 16)
        with self.assertRaises(InvalidSizeError):
            self.index.peers(5, 0)

    def test_concurrent_lookups_agree(self):
        results = []

        def lookup():
            results.append(self.index.peers(9, 10))

        threads = [threading.Thread(target=lookup) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(results), 8)
        self.assertTrue(all(r is results[0] for r in results))
        self.assertEqual(len(self.index), 1)

    def test_shared_index(self):
        self.assertIs(get_peer_index(), get_peer_index())
