"""
Benchmark suite for jtree parsing and writing.

Compares jtree against other JSON libraries:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

jtree builds JSONArray / JSONObject trees and accepts lenient input, so the
numbers measure the cost of that model rather than a like-for-like decoder.
"""
