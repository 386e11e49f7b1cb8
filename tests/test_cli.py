import json

import pytest
from PIL import Image

from color_token_generator.cli import main


def test_writes_json_tokens_and_report(tmp_path, capsys):
    main(["#3366FF", "--saturation", "14", "-o", str(tmp_path), "--report"])

    data = json.loads((tmp_path / "tokens.json").read_text())
    assert data["color"]["seed"]["primary"]["$value"] == "#3366FF"
    assert data["$extensions"]["color-token-generator"]["compliance"] == "AA"
    assert "READABILITY REPORT" in (tmp_path / "tokens-readability.txt").read_text()

    out = capsys.readouterr().out
    assert "Exported:" in out
    assert "Neutral contrast matrix: 10x10" in out


def test_writes_css(tmp_path):
    main(["3366ff", "--format", "css", "--compliance", "aaa", "--name", "brand", "-o", str(tmp_path)])

    css = (tmp_path / "brand.css").read_text()
    assert css.startswith(":root {\n")
    assert "  --color-seed-primary: #3366FF;" in css


def test_overrides_from_flag_and_file(tmp_path):
    overrides = tmp_path / "overrides.json"
    overrides.write_text(json.dumps({"dark.surface.neutral.surfaceBase": "{seed.white}"}))

    main(
        [
            "#3366FF",
            "--override",
            "surface.neutral.surfaceBase={seed.black}",
            "--overrides-file",
            str(overrides),
            "--prefix",
            "Acme",
            "-o",
            str(tmp_path),
        ]
    )

    semantic = json.loads((tmp_path / "tokens.json").read_text())["acme"]["semantic"]
    assert semantic["light"]["surface"]["neutral"]["surfaceBase"]["$value"] == "{seed.black}"
    assert semantic["dark"]["surface"]["neutral"]["surfaceBase"]["$value"] == "{seed.white}"


def test_roles_file_renames_tokens(tmp_path):
    roles = tmp_path / "roles.json"
    roles.write_text(json.dumps({"text.primary": "text.neutral.body"}))

    main(["#3366FF", "--roles-file", str(roles), "-o", str(tmp_path)])

    text = json.loads((tmp_path / "tokens.json").read_text())["color"]["semantic"]["light"]["text"]
    assert "body" in text["neutral"]
    assert "textPrimary" not in text["neutral"]


def test_seed_from_image(tmp_path, capsys):
    image = tmp_path / "logo.png"
    img = Image.new("RGB", (40, 40), (128, 128, 128))
    img.paste((51, 102, 255), (0, 0, 20, 40))
    img.save(image)

    main(["--from-image", str(image), "-o", str(tmp_path)])

    assert "Analyzing:" in capsys.readouterr().out
    data = json.loads((tmp_path / "tokens.json").read_text())
    assert data["color"]["seed"]["primary"]["$value"].startswith("#")


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["#zzzzzz"],
        ["#3366FF", "--from-image", "logo.png"],
        ["#3366FF", "--compliance", "A"],
        ["#3366FF", "--harmony", "sideways"],
        ["#3366FF", "--override", "surface.neutral.surfaceBase"],
    ],
)
def test_bad_arguments_exit(argv, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main(argv + ["-o", str(tmp_path)])
    assert exc.value.code == 2


def test_bad_overrides_file_exits(tmp_path):
    overrides = tmp_path / "overrides.json"
    overrides.write_text("[]")
    with pytest.raises(SystemExit):
        main(["#3366FF", "--overrides-file", str(overrides), "-o", str(tmp_path)])


def test_colliding_roles_file_exits(tmp_path):
    roles = tmp_path / "roles.json"
    roles.write_text(json.dumps({"text.primary": "text.neutral.textSecondary"}))
    with pytest.raises(SystemExit):
        main(["#3366FF", "--roles-file", str(roles), "-o", str(tmp_path)])
