import json
import os

from langnews.__main__ import main

from .conftest import FakeFetcher


def test_main_generates_articles(tmp_path, fake_fetcher, capsys):
    output_dir = str(tmp_path / "articles")

    exit_code = main([output_dir], fetcher=fake_fetcher)

    out = capsys.readouterr().out
    assert exit_code == 0
    assert len(os.listdir(output_dir)) == 3
    assert out.startswith("Haskell News Scraper\n====================\n")
    assert f"Done! Generated articles in {output_dir}" in out


def test_main_second_run_skips(tmp_path, fake_fetcher, capsys):
    output_dir = str(tmp_path / "articles")
    main([output_dir], fetcher=fake_fetcher)
    capsys.readouterr()

    assert main([output_dir], fetcher=fake_fetcher) == 0
    assert capsys.readouterr().out.count("- Skipped (exists):") == 3


def test_main_archive_failure_exit_code(tmp_path, capsys):
    exit_code = main([str(tmp_path / "articles")], fetcher=FakeFetcher({}))

    assert exit_code == 1
    assert "Error: Failed to fetch https://blog.haskell.org/archive/" in capsys.readouterr().out


def test_main_bad_config_exit_code(tmp_path, fake_fetcher):
    config_file = tmp_path / "langnews.json"
    config_file.write_text(json.dumps({"max_articles": 0}), encoding="utf-8")

    assert main(["--config", str(config_file)], fetcher=fake_fetcher) == 1


def test_main_save_config(tmp_path, fake_fetcher):
    config_file = tmp_path / "saved.json"
    output_dir = str(tmp_path / "articles")

    main([output_dir, "--max-articles", "2", "--save-config", str(config_file)], fetcher=fake_fetcher)

    saved = json.loads(config_file.read_text(encoding="utf-8"))
    assert saved["output_dir"] == output_dir
    assert saved["max_articles"] == 2
