import struct

import pytest

from mnistnet.dataset import Entry, read_file


def _image(seed):
    return bytes((seed + i) % 256 for i in range(28 * 28))


def _write(tmp_path, images, labels, image_magic=2051, label_magic=2049, count=None):
    count = len(images) if count is None else count
    data_path = tmp_path / "images.idx3-ubyte"
    label_path = tmp_path / "labels.idx1-ubyte"
    data_path.write_bytes(
        struct.pack(">iiii", image_magic, count, 28, 28) + b"".join(images)
    )
    label_path.write_bytes(struct.pack(">ii", label_magic, count) + bytes(labels))
    return data_path, label_path


def test_round_trip_of_entries(tmp_path):
    images = [_image(0), _image(100), _image(200)]
    labels = [7, 2, 9]
    data_path, label_path = _write(tmp_path, images, labels)

    entries = read_file(data_path, label_path)

    assert [entry.label for entry in entries] == labels
    assert [entry.pixels() for entry in entries] == images


def test_rows_are_split_in_order(tmp_path):
    image = _image(5)
    data_path, label_path = _write(tmp_path, [image], [3])

    (entry,) = read_file(str(data_path), str(label_path))

    assert len(entry.image) == 28
    assert all(len(row) == 28 for row in entry.image)
    assert entry.image[0] == image[:28]
    assert entry.image[27] == image[-28:]


def test_empty_dataset(tmp_path):
    data_path, label_path = _write(tmp_path, [], [])
    assert read_file(data_path, label_path) == []


def test_wrong_image_magic(tmp_path):
    data_path, label_path = _write(tmp_path, [_image(1)], [1], image_magic=2049)
    with pytest.raises(ValueError, match="2051"):
        read_file(data_path, label_path)


def test_wrong_label_magic(tmp_path):
    data_path, label_path = _write(tmp_path, [_image(1)], [1], label_magic=2051)
    with pytest.raises(ValueError, match="2049"):
        read_file(data_path, label_path)


def test_truncated_images(tmp_path):
    data_path, label_path = _write(tmp_path, [_image(1)], [1, 2], count=2)
    with pytest.raises(EOFError):
        read_file(data_path, label_path)


def test_truncated_labels(tmp_path):
    data_path, label_path = _write(tmp_path, [_image(1), _image(2)], [1], count=2)
    with pytest.raises(EOFError):
        read_file(data_path, label_path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "absent-images", tmp_path / "absent-labels")


def test_entry_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Entry(image=(bytes(28),) * 27, label=0)
    with pytest.raises(ValueError):
        Entry(image=(bytes(27),) * 28, label=0)