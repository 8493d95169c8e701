import pytest

from quasarcore.dxt_block import compress_dxt_block
from quasarcore.dxt_image import (
    extract_block,
    linearize,
    rgb_to_ycocg_block,
    ryg_compress,
    ryg_compress_ycocg,
)


def _gradient(width, height):
    data = bytearray()
    for y in range(height):
        for x in range(width):
            data += bytes(((x * 37) % 256, (y * 53) % 256, ((x + y) * 19) % 256, (x * y * 7) % 256))
    return bytes(data)


def test_extract_full_block_copies_rows():
    width, height = 8, 8
    image = _gradient(width, height)
    block = extract_block(image, 4, 4, width, height)
    expected = b"".join(image[(4 + r) * width * 4 + 16 : (4 + r) * width * 4 + 32] for r in range(4))
    assert block == expected


def test_extract_single_pixel_image_repeats_pixel():
    pixel = bytes((10, 20, 30, 40))
    assert extract_block(pixel, 0, 0, 1, 1) == pixel * 16


def test_extract_partial_block_uses_inner_pixels():
    width, height = 3, 2
    image = _gradient(width, height)
    block = extract_block(image, 0, 0, width, height)
    assert len(block) == 64

    def px(x, y):
        start = (y * width + x) * 4
        return image[start : start + 4]

    # Rows follow the pattern 0,1,0,1 and columns 0,1,2,0.
    for i, row in enumerate((0, 1, 0, 1)):
        for j, col in enumerate((0, 1, 2, 0)):
            assert block[i * 16 + j * 4 : i * 16 + j * 4 + 4] == px(col, row)


def test_extract_rejects_origin_outside_image():
    with pytest.raises(ValueError):
        extract_block(bytes(64), 4, 0, 4, 4)


def test_extract_rejects_wrong_size():
    with pytest.raises(ValueError):
        extract_block(bytes(10), 0, 0, 4, 4)


def test_ycocg_of_gray_is_neutral():
    block = bytes((100, 100, 100, 255)) * 16
    out = rgb_to_ycocg_block(block)
    assert len(out) == 64
    for i in range(16):
        co, cg, scale, luma = out[i * 4 : i * 4 + 4]
        assert co == 128
        assert scale == 0
        assert luma == 100


def test_ycocg_scale_byte_is_always_zero():
    out = rgb_to_ycocg_block(_gradient(4, 4))
    assert out[2::4] == bytes(16)


def test_ycocg_rejects_wrong_size():
    with pytest.raises(ValueError):
        rgb_to_ycocg_block(bytes(63))


@pytest.mark.parametrize("width,height", [(4, 4), (5, 3), (8, 4), (1, 9)])
def test_compressed_sizes(width, height):
    image = _gradient(width, height)
    blocks = ((width + 3) // 4) * ((height + 3) // 4)
    assert len(ryg_compress(image, width, height)) == blocks * 8
    assert len(ryg_compress(image, width, height, dxt5=True)) == blocks * 16
    assert len(ryg_compress_ycocg(image, width, height)) == blocks * 16


def test_compress_matches_blockwise_compression():
    width, height = 8, 4
    image = _gradient(width, height)
    result = ryg_compress(image, width, height, dxt5=True)
    first = compress_dxt_block(extract_block(image, 0, 0, width, height), True, 10)
    second = compress_dxt_block(extract_block(image, 4, 0, width, height), True, 10)
    assert result == first + second


def test_ycocg_compress_matches_blockwise_compression():
    width, height = 4, 4
    image = _gradient(width, height)
    expected = compress_dxt_block(rgb_to_ycocg_block(image), True, 10)
    assert ryg_compress_ycocg(image, width, height) == expected


def test_empty_image_compresses_to_nothing():
    assert ryg_compress(b"", 0, 0) == b""


def test_compress_rejects_bad_length():
    with pytest.raises(ValueError):
        ryg_compress(bytes(12), 2, 2)


def test_linearize_endpoints():
    assert linearize(bytes((0, 255, 0, 255))) == bytes((0, 255, 0, 255))


def test_linearize_is_monotonic_and_darkens():
    values = bytes(range(256))
    out = linearize(values)
    assert len(out) == 256
    assert all(a <= b for a, b in zip(out, out[1:]))
    assert all(o <= v for o, v in zip(out, values))


def test_linearize_rejects_partial_pixel():
    with pytest.raises(ValueError):
        linearize(bytes(5))