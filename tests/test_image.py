import pytest

from relevo.image import Color, Image


def test_new_image_is_black():
    image = Image(2, 3)
    assert all(image.pixel(r, c) == Color(0, 0, 0) for r in range(2) for c in range(3))


def test_set_pixel_round_trip():
    image = Image(4, 5)
    image.set_pixel(3, 4, Color(12, 34, 56))
    assert image.pixel(3, 4) == Color(12, 34, 56)
    assert image.pixel(0, 0) == Color(0, 0, 0)


@pytest.mark.parametrize("row,column", [(2, 0), (0, 3), (-1, 0), (0, -1)])
def test_pixel_out_of_range(row, column):
    image = Image(2, 3)
    with pytest.raises(IndexError):
        image.pixel(row, column)
    with pytest.raises(IndexError):
        image.set_pixel(row, column, Color(1, 1, 1))


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Image(-1, 3)


def test_ppm_header_uses_width_then_height():
    image = Image(2, 3)
    lines = image.to_ppm().splitlines()
    assert lines[:3] == ["P3", "3 2", "255"]
    assert len(lines) == 3 + 6


def test_ppm_pixels_in_row_major_order():
    image = Image(2, 2)
    image.set_pixel(0, 1, Color(1, 2, 3))
    image.set_pixel(1, 0, Color(4, 5, 6))
    lines = image.to_ppm().splitlines()[3:]
    assert lines == ["0 0 0", "1 2 3", "4 5 6", "0 0 0"]


def test_save_writes_ppm(tmp_path):
    image = Image(1, 2)
    image.set_pixel(0, 0, Color(255, 128, 7))
    target = tmp_path / "out.ppm"
    image.save(target)
    assert target.read_text() == image.to_ppm()


def test_save_truncates_existing_file(tmp_path):
    target = tmp_path / "out.ppm"
    target.write_text("x" * 1000)
    Image(1, 1).save(target)
    assert target.read_text() == Image(1, 1).to_ppm()


def test_shaded_truncates():
    assert Color(100, 201, 51).shaded(0.5) == Color(50, 100, 25)


def test_shaded_identity_and_zero():
    color = Color(17, 99, 240)
    assert color.shaded(1) == color
    assert color.shaded(0) == Color(0, 0, 0)


def test_shaded_never_brighter():
    color = Color(200, 150, 3)
    darker = color.shaded(0.7)
    assert darker.r <= color.r and darker.g <= color.g and darker.b <= color.b