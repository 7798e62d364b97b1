from .record_reader import PuzzleRecord, read_records
from .record_runner import RecordRunner
