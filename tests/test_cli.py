import json

from name_resolution_engine.cli.run_matching import main


def test_cli_writes_commitment_report(tmp_path):
    catalog_path = tmp_path / "collegeLogos.json"
    catalog_path.write_text(
        json.dumps(
            [
                {
                    "name": "Clemson University",
                    "alternativeNames": ["Clemson"],
                    "logo": "https://cdn.example.com/clemson.png",
                }
            ]
        )
    )
    players_path = tmp_path / "players.json"
    players_path.write_text(
        json.dumps([{"commitment": "Clemson"}, {"commitment": "Duke"}])
    )
    output_path = tmp_path / "report.json"

    exit_code = main(
        [
            "--catalog",
            str(catalog_path),
            "--players-file",
            str(players_path),
            "--output",
            str(output_path),
            "--log-level",
            "warning",
        ]
    )

    assert exit_code == 0
    report = json.loads(output_path.read_text())
    assert report["summary"] == {"total": 2, "matched": 1, "unmatched": 1}
    assert report["success"] is True
    assert report["matchedCommitments"][0]["logo_url"] == (
        "https://cdn.example.com/clemson.png"
    )


def test_cli_prints_to_stdout(tmp_path, capsys):
    catalog_path = tmp_path / "collegeLogos.json"
    catalog_path.write_text(json.dumps([{"name": "Duke University", "logo": None}]))
    players_path = tmp_path / "players.json"
    players_path.write_text(json.dumps([{"commitment": "Duke University"}]))

    main(["--catalog", str(catalog_path), "--players-file", str(players_path)])

    report = json.loads(capsys.readouterr().out)
    assert report["matchedCommitments"][0]["strategy"] == "exact-canonical"
    assert report["unmatchedCommitments"] == []
