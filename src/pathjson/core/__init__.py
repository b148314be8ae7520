"""Segment scanning and multi-codec decoding of JSON embedded in paths."""

from pathjson.core.candidates import CandidateSequence, find_start_index, split_path
from pathjson.core.decoder import CODEC_CHAIN, decode_path, decode_segments, try_parse_json
from pathjson.core.validator import dump_document, parse_json_document

__all__ = [
    "CODEC_CHAIN",
    "CandidateSequence",
    "decode_path",
    "decode_segments",
    "dump_document",
    "find_start_index",
    "parse_json_document",
    "split_path",
    "try_parse_json",
]
