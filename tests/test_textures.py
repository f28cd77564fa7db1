import numpy as np
import pytest
from PIL import Image

from raycube.errors import ExecutionError
from raycube.textures import TorchAnimation, load_texture, load_torch_frames


def _write_png(path, size, color):
    Image.new("RGBA", size, color).save(path)


def test_load_texture_round_trip(tmp_path):
    path = tmp_path / "tex.png"
    img = Image.new("RGBA", (3, 2), (10, 20, 30, 255))
    img.putpixel((2, 1), (200, 100, 50, 255))
    img.save(path)
    data = load_texture(path)
    assert data.shape == (2, 3, 4)
    assert data.dtype == np.uint8
    assert tuple(data[0, 0]) == (10, 20, 30, 255)
    assert tuple(data[1, 2]) == (200, 100, 50, 255)


def test_load_texture_converts_rgb_to_rgba(tmp_path):
    path = tmp_path / "rgb.png"
    Image.new("RGB", (2, 2), (1, 2, 3)).save(path)
    data = load_texture(path)
    assert tuple(data[1, 1]) == (1, 2, 3, 255)


def test_load_texture_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_texture(tmp_path / "nope.png")


def test_load_texture_not_an_image(tmp_path):
    path = tmp_path / "bad.png"
    path.write_text("not an image")
    with pytest.raises(OSError):
        load_texture(path)


def test_load_torch_frames_in_order(tmp_path):
    for n in range(1, 6):
        _write_png(tmp_path / f"torch{n}.png", (2, 2), (n, 0, 0, 255))
    frames = load_torch_frames(tmp_path)
    assert len(frames) == 5
    assert [int(f[0, 0, 0]) for f in frames] == [1, 2, 3, 4, 5]


def test_load_torch_frames_missing_one(tmp_path):
    for n in range(1, 5):
        _write_png(tmp_path / f"torch{n}.png", (2, 2), (n, 0, 0, 255))
    with pytest.raises(ExecutionError) as info:
        load_torch_frames(tmp_path)
    assert info.value.code == 6


def test_animation_waits_for_interval():
    anim = TorchAnimation(["a", "b", "c"], interval=1)
    assert anim.update(0.5) == 0
    assert anim.frame == "a"
    assert anim.update(1) == 1
    assert anim.update(1.5) == 1
    assert anim.frame == "b"


def test_animation_wraps_around():
    frames = list(range(5))
    anim = TorchAnimation(frames, interval=1)
    seen = [anim.update(t) for t in range(1, 6)]
    assert seen == [1, 2, 3, 4, 0]
    assert anim.frame == frames[0]


def test_animation_needs_frames():
    with pytest.raises(ValueError):
        TorchAnimation([])