"""
Solution Debug Utilities

Functions for saving a picture of a solution's board sequence and
managing debug output.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from src.solver import BoardState, PieceKind, Solution


# Debug settings
DEBUG_DIR = Path("./debug")
MAX_DEBUG_IMAGES = 10

CELL_SIZE = 48
BOARD_GAP = 24
MARGIN = 10
HEADER_HEIGHT = 30

LIGHT_SQUARE = "#ffffff"
DARK_SQUARE = "#d3d3d3"
MOVED_OUTLINE = "#1e64c8"

PIECE_COLORS = {
    PieceKind.KING: "#b22222",
    PieceKind.BISHOP: "#2e7d32",
    PieceKind.ROOK: "#1a237e",
}


def _load_font(size: int):
    try:
        return ImageFont.truetype("arial.ttf", size)
    except OSError:
        return ImageFont.load_default()


def render_solution(solution: Solution, cell_size: int = CELL_SIZE) -> Image.Image:
    """
    Draw every board of a solution side by side.

    Annotations include:
    - Checkered cells with piece symbols
    - The cell each move landed on outlined in blue
    - Strategy, status and move count header

    Args:
        solution: Solution to draw (its board_states must be set)
        cell_size: Pixel size of one cell

    Returns:
        RGB image
    """
    boards = solution.board_states
    if not boards:
        raise ValueError("Solution has no board states to render")

    rows, cols = boards[0].rows, boards[0].cols
    board_w, board_h = cols * cell_size, rows * cell_size
    width = MARGIN * 2 + len(boards) * board_w + (len(boards) - 1) * BOARD_GAP
    height = MARGIN * 2 + HEADER_HEIGHT + board_h

    image = Image.new("RGB", (width, height), "white")
    draw = ImageDraw.Draw(image)
    font = _load_font(12)
    piece_font = _load_font(cell_size // 2)

    header = (f"{solution.metrics.strategy_name}: {solution.status.name}, "
              f"{solution.move_count} moves, {solution.metrics.computation_time_ms:.1f}ms")
    draw.text((MARGIN, MARGIN), header, fill="blue", font=font)

    top = MARGIN + HEADER_HEIGHT
    for index, board in enumerate(boards):
        left = MARGIN + index * (board_w + BOARD_GAP)
        landed = solution.moves[index - 1].target if index > 0 else None
        _draw_board(draw, board, left, top, cell_size, piece_font, landed)

    return image


def _draw_board(draw: ImageDraw.ImageDraw, board: BoardState, left: int, top: int,
                cell_size: int, font, highlight: Optional[tuple]) -> None:
    for r in range(board.rows):
        for c in range(board.cols):
            x, y = left + c * cell_size, top + r * cell_size
            fill = LIGHT_SQUARE if (r + c) % 2 == 0 else DARK_SQUARE
            draw.rectangle([x, y, x + cell_size, y + cell_size], fill=fill, outline="black")

            kind = board.grid[r][c]
            if kind is not PieceKind.EMPTY:
                draw.text((x + cell_size // 3, y + cell_size // 4), kind.symbol,
                          fill=PIECE_COLORS.get(kind, "black"), font=font)

            if highlight == (r, c):
                draw.rectangle([x + 1, y + 1, x + cell_size - 1, y + cell_size - 1],
                               outline=MOVED_OUTLINE, width=3)


def save_solution_image(solution: Solution, path: Optional[Path] = None) -> Path:
    """
    Save a rendering of the solution as PNG.

    Args:
        solution: Solution to draw
        path: Output file path (defaults to a timestamped file in DEBUG_DIR)

    Returns:
        Path the image was written to
    """
    # Ensure debug directory exists
    DEBUG_DIR.mkdir(parents=True, exist_ok=True)

    if path is None:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")[:-3]
        path = DEBUG_DIR / f"debug_{stamp}.png"

    render_solution(solution).save(path, "PNG")

    # Cleanup old debug images
    _cleanup_debug_images()
    return Path(path)


def _cleanup_debug_images() -> None:
    """Remove old debug images, keeping only the most recent MAX_DEBUG_IMAGES."""
    if not DEBUG_DIR.exists():
        return

    # Get all debug images sorted by modification time
    debug_files = sorted(
        DEBUG_DIR.glob("debug_*.png"),
        key=lambda p: p.stat().st_mtime,
        reverse=True
    )

    # Remove old files
    for old_file in debug_files[MAX_DEBUG_IMAGES:]:
        try:
            old_file.unlink()
        except OSError:
            pass
