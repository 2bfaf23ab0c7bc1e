"""
jsonx demonstration script.
"""

import tempfile
from pathlib import Path

import jsonx
from jsonx import JsonX


def main():
    print("jsonx - JSON with comments and trailing commas")
    print("=" * 40)

    examples = [
        ('{"a": 1, "b": [1,2,3,],}', "Trailing commas"),
        ('{"a": 1 # comment\n}', "Hash comment"),
        ('{"a": 1, // comment\n "b": 2}', "Slash comment"),
        ('{"url": "http://example.com#frag"}', "Comment markers inside strings"),
        ('{"a": {"b": {"c": 1}}}', "Nesting deeper than max_depth=2"),
    ]

    for i, (jsonx_str, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:  {jsonx_str}")

        session = JsonX().max_depth(2 if "max_depth" in description else 512)
        try:
            result = session.decode_text(jsonx_str)
            print(f"JSON:   {session.source}")
            print(f"Output: {result}")
        except jsonx.JsonXError as e:
            print(f"Error:  {e}")

    print(f"\n{len(examples) + 1}. File translation")
    with tempfile.TemporaryDirectory() as tmp:
        source = Path(tmp) / "settings.jsonx"
        source.write_text('{\n  "debug": true, # local only\n}\n', encoding="utf-8")
        written = jsonx.translate_file(source)
        target = source.with_suffix(".json")
        print(f"Wrote {written} bytes to {target.name}: {target.read_text()}")


if __name__ == "__main__":
    main()
