import struct

from mnistnet.cli import main


def _write_dataset(directory, labels, image_magic=2051, label_magic=2049):
    images_path = directory / "images.idx3-ubyte"
    labels_path = directory / "labels.idx1-ubyte"
    image = bytes(i % 256 for i in range(28 * 28))
    images_path.write_bytes(
        struct.pack(">iiii", image_magic, len(labels), 28, 28) + image * len(labels)
    )
    labels_path.write_bytes(struct.pack(">ii", label_magic, len(labels)) + bytes(labels))
    return str(images_path), str(labels_path)


def test_main_prints_first_entry(tmp_path, capsys):
    images, labels = _write_dataset(tmp_path, [3, 5])
    code = main(["--images", images, "--labels", labels])
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert code == 0
    assert lines[0] == "Entry label: 3"
    assert lines[1] == "Entry image:"
    assert len(lines) == 2 + 28
    assert all(len(line) == 4 * 28 for line in lines[2:])


def test_main_missing_files(tmp_path, capsys):
    code = main(
        ["--images", str(tmp_path / "none"), "--labels", str(tmp_path / "none2")]
    )
    assert code == 1
    assert "failed to read dataset" in capsys.readouterr().err


def test_main_bad_magic(tmp_path, capsys):
    images, labels = _write_dataset(tmp_path, [1], image_magic=1234)
    code = main(["--images", images, "--labels", labels])
    assert code == 1
    assert "2051" in capsys.readouterr().err


def test_main_empty_dataset(tmp_path, capsys):
    images, labels = _write_dataset(tmp_path, [])
    code = main(["--images", images, "--labels", labels])
    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "failed to read dataset" in captured.err