import pytest

from megatex.font import Font, FontKerning, FontSymbol

A_SYMBOL = FontSymbol(x=1, y=2, width=5, height=7, xoffset=0, yoffset=1, xadvance=6)
V_SYMBOL = FontSymbol(x=8, y=2, width=5, height=7, xoffset=1, yoffset=1, xadvance=6)
AV_KERN = -2
VA_KERN = 3


def make_font():
    symbols = [FontSymbol() for _ in range(128)]
    symbols[ord("A")] = A_SYMBOL
    symbols[ord("V")] = V_SYMBOL
    kerning = [FontKerning() for _ in range(9)]
    # both pairs hash to slot 7 with multiplier 1 and mask 7
    kerning[7] = FontKerning(AV_KERN, ord("A"), ord("V"))
    kerning[8] = FontKerning(VA_KERN, ord("V"), ord("A"))
    return Font(
        kerning=kerning,
        symbols=symbols,
        base=8,
        char_height=10,
        symbol_count=128,
        kerning_multiplier=1,
        kerning_mask=7,
        max_collisions=1,
    )


def test_kerning_direct_hit():
    assert make_font().determine_kerning("A", "V") == AV_KERN


def test_kerning_after_collision():
    assert make_font().determine_kerning(ord("V"), ord("A")) == VA_KERN


def test_kerning_missing_pair_is_zero():
    assert make_font().determine_kerning("A", "A") == 0


def test_kerning_collision_limit():
    font = make_font()
    font.max_collisions = 0
    assert font.determine_kerning("V", "A") == 0


def test_render_positions_first_glyph():
    rects = make_font().render("A", 10, 20)
    assert len(rects) == 1
    assert rects[0].x == 10 + A_SYMBOL.xoffset
    assert rects[0].y == 20 + A_SYMBOL.yoffset
    assert (rects[0].s, rects[0].t) == (A_SYMBOL.x, A_SYMBOL.y)
    assert (rects[0].width, rects[0].height) == (A_SYMBOL.width, A_SYMBOL.height)


def test_render_applies_kerning():
    rects = make_font().render("AV", 0, 0)
    pen_a = rects[0].x - A_SYMBOL.xoffset
    pen_v = rects[1].x - V_SYMBOL.xoffset
    assert pen_v - pen_a == A_SYMBOL.xadvance + AV_KERN


def test_render_newline_returns_to_start():
    font = make_font()
    rects = font.render("A\nA", 10, 20)
    assert rects[1].x == rects[0].x
    assert rects[1].y - rects[0].y == font.char_height


def test_render_skips_symbols_out_of_range():
    rects = make_font().render("A\u00ffA", 0, 0)
    assert len(rects) == 2


def test_count_gfx_matches_render():
    font = make_font()
    message = "AV\nA\u00ffV"
    assert font.count_gfx(message) == 3 * len(font.render(message, 0, 0))


def test_measure_single_line():
    font = make_font()
    size = font.measure("AV")
    assert size.x == A_SYMBOL.xadvance + AV_KERN + V_SYMBOL.xadvance
    assert size.y == font.char_height


@pytest.mark.parametrize("message", ["A\nA", "AV\nA"])
def test_measure_two_lines(message):
    font = make_font()
    size = font.measure(message)
    assert size.y == 2 * font.char_height
    assert size.x == font.measure(message.split("\n")[0]).x


def test_measure_empty_is_one_line_high():
    font = make_font()
    size = font.measure("")
    assert size.x == 0
    assert size.y == font.char_height