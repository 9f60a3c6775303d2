import base64
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from saucedemo_e2e import reporting


def make_item(html_plugin=None):
    pluginmanager = MagicMock()
    pluginmanager.getplugin.return_value = html_plugin
    config = SimpleNamespace(pluginmanager=pluginmanager)
    return SimpleNamespace(stash=pytest.Stash(), config=config, name='test_checkout')


def test_attachments_are_queued_as_bytes():
    item = make_item()

    reporting.add_text_attachment(item, "Notes", "cart had 3 items")
    reporting.add_json_attachment(item, "Cart", {'items': 3})

    queued = reporting.pending_attachments(item)
    assert [a.name for a in queued] == ["Notes", "Cart"]
    assert queued[0].content == b"cart had 3 items"
    assert queued[1].mime_type == 'application/json'
    assert b'"items": 3' in queued[1].content


def test_queued_attachments_become_report_extras(logger):
    html_plugin = SimpleNamespace(extras=MagicMock())
    item = make_item(html_plugin)
    report = SimpleNamespace(when='teardown')
    reporting.add_attachment(item, "Screenshot_test_checkout", "image/png", b'\x89PNG')
    reporting.add_log_attachment(item, "Log", "line one")

    reporting.attach_to_report(item, report, logger)

    extras = html_plugin.extras
    extras.image.assert_called_once_with(
        base64.b64encode(b'\x89PNG').decode('ascii'), name="Screenshot_test_checkout",
        mime_type="image/png", extension="png")
    extras.text.assert_called_once_with("line one", name="Log")
    assert report.extras == [extras.image.return_value, extras.text.return_value]
    assert reporting.pending_attachments(item) == []


def test_nothing_attached_without_html_plugin(logger):
    item = make_item(html_plugin=None)
    report = SimpleNamespace(when='call')
    reporting.add_text_attachment(item, "Notes", "kept for later")

    reporting.attach_to_report(item, report, logger)

    assert not hasattr(report, 'extras')
    assert len(reporting.pending_attachments(item)) == 1


def test_broken_attachment_is_skipped_with_warning(logger):
    html_plugin = SimpleNamespace(extras=MagicMock())
    html_plugin.extras.json.side_effect = ValueError("bad json")
    item = make_item(html_plugin)
    report = SimpleNamespace(when='call', extras=[])
    reporting.add_json_attachment(item, "Cart", {'items': 1})
    reporting.add_text_attachment(item, "Notes", "still attached")

    reporting.attach_to_report(item, report, logger)

    assert report.extras == [html_plugin.extras.text.return_value]
    logger.warning.assert_called_once()


def test_step_logs_and_reraises(logger):
    with pytest.raises(AssertionError):
        with reporting.step("Check cart badge", logger):
            assert 1 == 2

    logger.info.assert_called_once_with("Step", step="Check cart badge")
    logger.error.assert_called_once()
