import argparse
import base64
import json
import logging
import sys

from config import DEFAULT_SYMBOL_SIZE, DEFAULT_TEXT_WIDTH, SIZE_HINTS
from rules_text_processor import render_oracle_text
from text_processing import plain_text
from html_renderer import render_nodes_html


def main(text: str, size: str = DEFAULT_SYMBOL_SIZE, output_format: str = 'nodes',
         output_path: str = None, width: int = DEFAULT_TEXT_WIDTH):
    if output_path:
        # Imported here so text-only runs don't build the image renderer
        from card_renderer import card_renderer

        image, (image_width, image_height) = card_renderer.generate_text_image(text, size, width)
        with open(output_path, 'wb') as f:
            f.write(base64.b64decode(image))
        print(f"Image saved to: {output_path} ({image_width}x{image_height})")
        return

    nodes = render_oracle_text(text, size)
    if output_format == 'html':
        print(render_nodes_html(nodes))
    elif output_format == 'plain':
        print(plain_text(nodes))
    else:
        print(json.dumps(nodes, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Render Magic: The Gathering oracle text.")
    parser.add_argument("text", type=str, nargs="?", help="The oracle text to render (use \\n for line breaks).")
    parser.add_argument("--file", type=str, help="Read the oracle text from a file instead")
    parser.add_argument("--size", type=str, default=DEFAULT_SYMBOL_SIZE, choices=SIZE_HINTS,
                        help=f"Symbol size hint (default: {DEFAULT_SYMBOL_SIZE})")
    parser.add_argument("--format", type=str, default="nodes", choices=["nodes", "html", "plain"],
                        help="Output format (default: nodes)")
    parser.add_argument("--output", type=str, help="Path to save a PNG rendering instead of printing")
    parser.add_argument("--width", type=int, default=DEFAULT_TEXT_WIDTH,
                        help=f"Width of the PNG rendering (default: {DEFAULT_TEXT_WIDTH})")
    args = parser.parse_args()

    if args.file:
        with open(args.file, 'r', encoding='utf-8') as f:
            source = f.read()
    elif args.text is not None:
        source = args.text.replace('\\n', '\n')
    elif not sys.stdin.isatty():
        source = sys.stdin.read()
    else:
        parser.error("Provide oracle text, --file, or pipe text on stdin")

    main(source, args.size, args.format, args.output, args.width)
