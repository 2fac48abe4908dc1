"""
Convert a hearing list spreadsheet (xlsx or csv) for one list type and print the
records as JSON. With --render, the converted data is passed through the
renderer for that list type and the rendered view is printed instead.
"""
import os
import sys
import json
import argparse
import logging

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from hearing_lists.ingest.errors import IngestError
from hearing_lists.ingest.list_types import DEFAULT_REGISTRY
from hearing_lists.rendering.renderer import RenderOptions, render_list

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("convert_list")


def main():
    parser = argparse.ArgumentParser(description="Convert a hearing list spreadsheet to JSON")
    parser.add_argument("list_type", choices=list(DEFAULT_REGISTRY.list_types()), help="List type identifier")
    parser.add_argument("path", type=str, help="Path to the .xlsx or .csv file")
    parser.add_argument("--render", action="store_true", help="Print the rendered view instead of raw records")
    parser.add_argument("--locale", type=str, default="en", choices=["en", "cy"], help="Locale for --render")
    parser.add_argument("--out", type=str, help="Write JSON here instead of stdout")
    args = parser.parse_args()

    with open(args.path, "rb") as f:
        buffer = f.read()
    try:
        data = DEFAULT_REGISTRY.convert(args.list_type, buffer)
    except IngestError as e:
        logger.error(f"Conversion failed: {e}")
        sys.exit(1)

    if args.render:
        payload = render_list(args.list_type, data, RenderOptions(locale=args.locale)).model_dump()
    else:
        payload = data
    text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info(f"Wrote {args.out}")
    else:
        print(text)


if __name__ == "__main__":
    main()
