import unittest
from io import BytesIO

from huffcodec.frequency import build_frequency_table
from huffcodec.logger import Logger, FrequencyAnalysisLog

class TestBuildFrequencyTable(unittest.TestCase):
    def test_counts_symbols(self):
        table = build_frequency_table(BytesIO(b"aaab"))
        self.assertEqual(table[ord('a')], 3)
        self.assertEqual(table[ord('b')], 1)
        self.assertEqual(table[ord('c')], 0)
        self.assertEqual(len(table), 2)
        self.assertEqual(table.total(), 4)

    def test_empty_input(self):
        table = build_frequency_table(BytesIO(b""))
        self.assertEqual(len(table), 0)
        self.assertEqual(table.total(), 0)

    def test_consumes_stream(self):
        stream = BytesIO(b"hello world")
        build_frequency_table(stream)
        self.assertEqual(stream.read(), b"")

    def test_small_chunks_match_single_read(self):
        data = bytes(range(256)) * 3 + b"xyz" * 7
        whole = build_frequency_table(BytesIO(data))
        chunked = build_frequency_table(BytesIO(data), chunk_size=5)
        self.assertEqual(whole, chunked)
        self.assertEqual(chunked.total(), len(data))

    def test_invalid_chunk_size(self):
        with self.assertRaises(ValueError):
            build_frequency_table(BytesIO(b"a"), chunk_size=0)

    def test_logs_analysis(self):
        logger = Logger()
        build_frequency_table(BytesIO(b"abca"), logger)
        logs = logger.get_logs(FrequencyAnalysisLog)
        self.assertEqual(len(logs), 1)
        self.assertEqual(logs[0].distinct_symbols, 3)
        self.assertEqual(logs[0].total_symbols, 4)

if __name__ == '__main__':
    unittest.main()
