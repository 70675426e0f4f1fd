import json

import pytest
import requests

import main
from conftest import FakeHttpClient
from gst_rates.cleartax import ClearTaxScraper


def test_run_update_writes_dataset(tmp_path, fake_http):
    output = tmp_path / "data" / "gst-data.json"
    output.parent.mkdir()
    output.write_text(
        json.dumps({
            "last_updated": "2024-01-01T00:00:00.000Z",
            "items": [
                {"item_category": "tea", "gst_percent": 5, "keywords": ["tea", "chai"]},
                {"item_category": "Discontinued", "gst_percent": 12, "keywords": ["gone"]},
            ],
        }),
        encoding="utf-8",
    )

    dataset = main.run_update(output, scraper=ClearTaxScraper(http_client=fake_http))

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["last_updated"] == dataset.last_updated
    assert data["last_updated"].endswith("Z")

    by_name = {i["item_category"]: i for i in data["items"]}
    assert list(by_name) == [
        "Milk and Cream",
        "Tea",
        "Mobile Phones",
        "Gold & Silver Jewellery",
        "Cement",
    ]
    assert "chai" in by_name["Tea"]["keywords"]
    assert "charger" in by_name["Mobile Phones"]["keywords"]
    assert by_name["Cement"]["keywords"] == ["cement"]


def test_run_update_dry_run_does_not_write(tmp_path, fake_http):
    output = tmp_path / "gst-data.json"
    dataset = main.run_update(output, scraper=ClearTaxScraper(http_client=fake_http), dry_run=True)

    assert len(dataset.items) == 5
    assert not output.exists()


def test_run_update_with_no_rows_writes_empty_dataset(tmp_path):
    output = tmp_path / "gst-data.json"
    http = FakeHttpClient(html="<html><body>No tables</body></html>")
    main.run_update(output, scraper=ClearTaxScraper(http_client=http))

    assert json.loads(output.read_text(encoding="utf-8"))["items"] == []


def test_fetch_error_leaves_previous_file_untouched(tmp_path):
    output = tmp_path / "gst-data.json"
    output.write_text('{"items": []}', encoding="utf-8")
    http = FakeHttpClient(error=requests.HTTPError("503"))

    with pytest.raises(requests.HTTPError):
        main.run_update(output, scraper=ClearTaxScraper(http_client=http))

    assert output.read_text(encoding="utf-8") == '{"items": []}'


def test_main_exits_with_error_on_failure(tmp_path, monkeypatch):
    def failing_run_update(*args, **kwargs):
        raise requests.ConnectionError("down")

    monkeypatch.setattr(main, "run_update", failing_run_update)

    with pytest.raises(SystemExit) as exc:
        main.main(["--output", str(tmp_path / "gst-data.json")])
    assert exc.value.code == 1


def test_main_passes_cli_options(tmp_path, monkeypatch):
    calls = []

    def fake_run_update(output_file, scraper=None, dry_run=False):
        calls.append((output_file, scraper.url, dry_run))

    monkeypatch.setattr(main, "run_update", fake_run_update)
    output = tmp_path / "out.json"
    main.main(["--output", str(output), "--url", "http://localhost/rates", "--dry-run"])

    assert calls == [(output, "http://localhost/rates", True)]


def test_settings_from_environment(monkeypatch):
    import config

    monkeypatch.setenv("GST_OUTPUT_FILE", "/tmp/gst.json")
    monkeypatch.setenv("GST_HTTP_TIMEOUT", "5")
    settings = config.get_settings()

    assert settings["output_file"] == "/tmp/gst.json"
    assert settings["timeout"] == 5
    assert settings["source_url"]


def test_default_settings_match_scraper_and_store(monkeypatch):
    import config
    from gst_rates.store import OUTPUT_FILE

    monkeypatch.delenv("GST_SOURCE_URL", raising=False)
    monkeypatch.delenv("GST_OUTPUT_FILE", raising=False)
    settings = config.get_settings()

    assert settings["source_url"] == ClearTaxScraper.URL
    assert settings["output_file"] == str(OUTPUT_FILE)
