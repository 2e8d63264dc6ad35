from PIL import Image, ImageDraw, ImageFont
import os
import re
import base64
import io
import logging
from typing import Dict, List, Optional, Tuple

from config import (
    MANA_SYMBOLS_DIR, FONTS_DIR, TEXT_FONT_FILE,
    DEFAULT_FONT_SIZE, DEFAULT_SYMBOL_SIZE, DEFAULT_TEXT_WIDTH, MAX_TEXT_WIDTH,
    TEXT_PADDING, TEXT_COLOR, EMPHASIS_COLOR, BACKGROUND_COLOR,
    SYMBOL_SCALE, HEADER_SCALE
)
from rules_text_processor import render_oracle_text

logger = logging.getLogger(__name__)

# Disc colors for symbols drawn without an image asset
GLYPH_COLORS = {
    'white': (248, 246, 216, 255),
    'blue': (193, 215, 233, 255),
    'black': (186, 177, 171, 255),
    'red': (228, 153, 119, 255),
    'green': (163, 192, 149, 255),
}
DEFAULT_GLYPH_COLOR = (204, 194, 193, 255)

MIN_TEXT_WIDTH = 50
MIN_SYMBOL_SIZE = 12
WORD_PATTERN = re.compile(r'\S+|\s+')


def glyph_color(glyph: str) -> Tuple[int, int, int, int]:
    """Pick the disc color for a glyph from the first color named in it."""
    for part in glyph.split('-'):
        if part in GLYPH_COLORS:
            return GLYPH_COLORS[part]
    return DEFAULT_GLYPH_COLOR


class OracleTextRenderer:
    """
    Lays out render nodes onto an image:
    - Word wrapping within a fixed width
    - Header, bold and italic styling
    - Mana symbols from image assets, or drawn discs when no asset exists
    """

    def __init__(self, symbols_dir: str = MANA_SYMBOLS_DIR, fonts_dir: str = FONTS_DIR,
                 font_size: int = DEFAULT_FONT_SIZE):
        self.symbols_dir = symbols_dir
        self.fonts_dir = fonts_dir
        self.font_size = font_size

        # Symbol images and fonts are loaded once and reused
        self._image_cache: Dict[str, Image.Image] = {}
        self._font_cache: Dict[int, ImageFont.ImageFont] = {}

        self.load_fonts()

    def _load_image_cached(self, image_path: str) -> Image.Image:
        """
        Load an image with caching to avoid repeated disk reads.

        Args:
            image_path: Path to the image file

        Returns:
            PIL Image object
        """
        if image_path not in self._image_cache:
            self._image_cache[image_path] = Image.open(image_path).convert('RGBA')
        return self._image_cache[image_path].copy()  # Return copy to avoid modifying cached image

    def clear_image_cache(self):
        """Clear the image cache to free up memory if needed."""
        self._image_cache.clear()
        logger.info("Image cache cleared")

    def get_cache_stats(self) -> dict:
        """Get statistics about the current cache state."""
        return {
            'cached_images': len(self._image_cache),
            'cached_fonts': len(self._font_cache),
        }

    def load_fonts(self):
        """Locate the rules text font, falling back to Pillow's default font"""
        font_path = os.path.join(self.fonts_dir, TEXT_FONT_FILE)
        self.font_path = font_path if os.path.exists(font_path) else None
        if self.font_path is None:
            logger.info("Font %s not found, using the default font", font_path)

    def get_font(self, size: int) -> ImageFont.ImageFont:
        """Get the rules text font at the specified size"""
        if size not in self._font_cache:
            if self.font_path:
                self._font_cache[size] = ImageFont.truetype(self.font_path, size)
            else:
                self._font_cache[size] = ImageFont.load_default(size)
        return self._font_cache[size]

    def symbol_size(self, size_hint: str) -> int:
        scale = SYMBOL_SCALE.get(size_hint, SYMBOL_SCALE[DEFAULT_SYMBOL_SIZE])
        return max(MIN_SYMBOL_SIZE, int(self.font_size * scale))

    def load_mana_symbol(self, glyph: str, size: int) -> Optional[Image.Image]:
        """Load a symbol image named after its glyph, resized to size x size"""
        symbol_path = os.path.join(self.symbols_dir, f'{glyph}.png')
        if not os.path.exists(symbol_path):
            return None
        try:
            return self._load_image_cached(symbol_path).resize((size, size), Image.Resampling.LANCZOS)
        except OSError as e:
            logger.warning("Error loading mana symbol %s: %s", symbol_path, e)
            return None

    def _layout(self, nodes: List[Dict], max_width: int) -> Tuple[List[List[Dict]], int]:
        """
        Break nodes into wrapped lines of draw operations.

        Returns the lines (each a list of ops with x positions) and the
        total height. Each op is {'op': 'text'|'symbol', 'x', 'width',
        'height', ...}.
        """
        measure = ImageDraw.Draw(Image.new('RGBA', (1, 1)))
        body_font = self.get_font(self.font_size)
        base_line_height = int(self.font_size * 1.2)

        lines: List[List[Dict]] = [[]]
        state = {'x': 0, 'at_line_start': True}

        def new_line():
            lines.append([])
            state['x'] = 0
            state['at_line_start'] = True

        def place(op: Dict):
            if state['x'] + op['width'] > max_width and not state['at_line_start']:
                new_line()
            op['x'] = state['x']
            lines[-1].append(op)
            state['x'] += op['width']
            state['at_line_start'] = False

        def place_text(text: str, font, fill, stroke: int = 0):
            line_height = int(font.size * 1.2) if hasattr(font, 'size') else base_line_height
            for piece in WORD_PATTERN.findall(text):
                width = measure.textbbox((0, 0), piece, font=font, stroke_width=stroke)[2]
                if piece.isspace():
                    # Spaces are dropped at the start of a wrapped line
                    if state['at_line_start']:
                        continue
                    if state['x'] + width > max_width:
                        new_line()
                        continue
                place({'op': 'text', 'text': piece, 'font': font, 'fill': fill, 'stroke': stroke,
                       'width': width, 'height': line_height})

        for node in nodes:
            node_type = node['type']
            if node_type == 'line_break':
                new_line()
            elif node_type == 'header':
                font = self.get_font(int(self.font_size * HEADER_SCALE[node['level']]))
                place_text(node['text'], font, TEXT_COLOR, stroke=1)
            elif node_type == 'bold':
                place_text(node['text'], body_font, TEXT_COLOR, stroke=1)
            elif node_type == 'italic':
                place_text(node['text'], body_font, EMPHASIS_COLOR)
            elif node_type == 'symbol':
                size = self.symbol_size(node.get('size', DEFAULT_SYMBOL_SIZE))
                place({'op': 'symbol', 'glyph': node['glyph'], 'original': node['original'],
                       'width': size + 3, 'height': size + 2, 'size': size})
            elif node_type == 'unresolved_symbol':
                place_text(node['original'], body_font, TEXT_COLOR)
            else:
                place_text(node['text'], body_font, TEXT_COLOR)

        height = sum(max([op['height'] for op in line] or [base_line_height]) for line in lines)
        return lines, height

    def _draw_symbol(self, image: Image.Image, draw: ImageDraw.ImageDraw, op: Dict, x: int, y: int):
        size = op['size']
        symbol_image = self.load_mana_symbol(op['glyph'], size)
        if symbol_image:
            image.paste(symbol_image, (x, y), symbol_image)
            return

        # No asset: colored disc with the token's inner text
        draw.ellipse([x, y, x + size - 1, y + size - 1], fill=glyph_color(op['glyph']),
                     outline=TEXT_COLOR)
        label = op['original'][1:-1].upper()
        label_font = self.get_font(max(6, int(size * 0.55)))
        bbox = draw.textbbox((0, 0), label, font=label_font)
        label_x = x + (size - (bbox[2] - bbox[0])) // 2 - bbox[0]
        label_y = y + (size - (bbox[3] - bbox[1])) // 2 - bbox[1]
        draw.text((label_x, label_y), label, fill=TEXT_COLOR, font=label_font)

    def render_nodes(self, nodes: List[Dict], width: int = DEFAULT_TEXT_WIDTH) -> Image.Image:
        """
        Draw render nodes onto a transparent image of the given width.

        Args:
            nodes: Render nodes from render_oracle_text
            width: Image width in pixels, padding included

        Returns:
            RGBA image tall enough for the wrapped text
        """
        width = max(MIN_TEXT_WIDTH, min(int(width), MAX_TEXT_WIDTH))
        max_width = width - 2 * TEXT_PADDING
        lines, text_height = self._layout(nodes, max_width)

        image = Image.new('RGBA', (width, text_height + 2 * TEXT_PADDING), BACKGROUND_COLOR)
        draw = ImageDraw.Draw(image)

        current_y = TEXT_PADDING
        base_line_height = int(self.font_size * 1.2)
        for line in lines:
            line_height = max([op['height'] for op in line] or [base_line_height])
            for op in line:
                x = TEXT_PADDING + op['x']
                # Center every item vertically within its line
                y = current_y + (line_height - op['height']) // 2
                if op['op'] == 'symbol':
                    self._draw_symbol(image, draw, op, x + 1, y + 1)
                else:
                    draw.text((x, y), op['text'], fill=op['fill'], font=op['font'],
                              stroke_width=op['stroke'], stroke_fill=op['fill'])
            current_y += line_height

        return image

    def generate_text_image(self, text: str, size: str = DEFAULT_SYMBOL_SIZE,
                            width: int = DEFAULT_TEXT_WIDTH) -> Tuple[str, Tuple[int, int]]:
        """
        Render oracle text to a PNG.

        Returns:
            (base64 encoded PNG, (width, height))
        """
        nodes = render_oracle_text(text, size)
        image = self.render_nodes(nodes, width)

        buffer = io.BytesIO()
        image.save(buffer, format='PNG')
        img_base64 = base64.b64encode(buffer.getvalue()).decode('utf-8')
        logger.info("Rendered %d nodes into a %dx%d image", len(nodes), image.width, image.height)
        return img_base64, image.size


# Global renderer instance
card_renderer = OracleTextRenderer()
