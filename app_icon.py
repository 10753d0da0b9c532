"""
Windows 3.1 style bell icon for Notification Timer.
Used for the tray icon and the window icon; run standalone to write
logo.png / logo.ico.
"""
from PIL import Image, ImageDraw
import math


# Windows 3.1 16-color palette
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GREEN = (0, 128, 0)
DARK_GREEN = (0, 80, 0)
LIGHT_GREEN = (128, 224, 128)
GRAY = (128, 128, 128)
DARK_GRAY = (64, 64, 64)
YELLOW = (255, 255, 0)
MAROON = (128, 0, 0)


def bell_outline(cx, top, bottom, half_top, half_bottom, steps=24):
    """Polygon for a bell body: rounded crown flaring out to the lip."""
    pts = []
    for i in range(steps + 1):
        t = i / steps
        # half width grows slowly first, then flares near the lip
        half = half_top + (half_bottom - half_top) * (t ** 2.2)
        pts.append((cx + half, top + (bottom - top) * t))
    left = [(2 * cx - x, y) for x, y in reversed(pts)]
    return pts + left


def create_bell_icon(size=256, muted=False):
    """Create a single bell icon.  ``muted`` greys it out (timer stopped)."""
    img = Image.new('RGBA', (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    s = size / 64  # designed at 64px
    w = max(1, int(s))

    body, shade, light = (GRAY, DARK_GRAY, (192, 192, 192)) if muted else (GREEN, DARK_GREEN, LIGHT_GREEN)

    cx = int(32 * s)
    top, lip = int(14 * s), int(46 * s)

    # Hanger loop
    lr = max(2, int(4 * s))
    draw.ellipse([cx - lr, top - 2 * lr + w, cx + lr, top + w],
                 outline=BLACK, width=max(1, int(2 * s)))

    # Drop shadow, then body
    off = max(1, int(2 * s))
    shape = bell_outline(cx, top, lip, 9 * s, 22 * s)
    draw.polygon([(x + off, y + off) for x, y in shape], fill=shade)
    draw.polygon(shape, fill=body, outline=BLACK)

    # Highlight stripe down the left flank
    for i in range(2, 20):
        t = i / 24
        half = 9 * s + 13 * s * (t ** 2.2)
        y = top + (lip - top) * t
        x = cx - half + max(2, int(3 * s))
        draw.point((int(x), int(y)), fill=light)
        draw.point((int(x) + 1, int(y)), fill=light)

    # Lip bar
    lip_h = max(2, int(3 * s))
    draw.rectangle([cx - int(24 * s), lip, cx + int(24 * s), lip + lip_h],
                   fill=shade, outline=BLACK, width=w)

    # Clapper
    cr = max(2, int(4 * s))
    cy = lip + lip_h + cr
    draw.ellipse([cx - cr, cy - cr, cx + cr, cy + cr],
                 fill=MAROON if not muted else DARK_GRAY, outline=BLACK, width=w)

    # Ring lines either side (only while ringing)
    if not muted:
        lw = max(1, int(1.5 * s))
        for side in (-1, 1):
            for k, r in enumerate((27 * s, 31 * s)):
                a0, a1 = (200, 240) if side < 0 else (300, 340)
                pts = [(cx + r * math.cos(math.radians(a)), int(30 * s) + r * math.sin(math.radians(a)))
                       for a in range(a0, a1 + 1, 5)]
                draw.line(pts, fill=YELLOW if k == 0 else BLACK, width=lw)

    return img


def generate_icon():
    """Generate logo.ico and logo.png files."""
    sizes = [16, 32, 48, 64, 128, 256]
    images = [create_bell_icon(s) for s in sizes]
    # ICO: largest first, then the smaller sizes
    images[-1].save('logo.ico', format='ICO', append_images=images[:-1])
    images[-1].save('logo.png', format='PNG')


if __name__ == "__main__":
    generate_icon()
    print("Generated logo.ico and logo.png")
