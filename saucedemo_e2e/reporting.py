"""
Report attachments and logged steps.

Attachments are queued on the pytest item while the test runs and turned
into pytest-html extras when its reports are built (see the
pytest_runtest_makereport hook in tests/conftest.py). Nothing here is
allowed to fail a test: problems are logged as warnings.
"""
import base64
import json
from collections import namedtuple
from contextlib import contextmanager

import pytest

Attachment = namedtuple('Attachment', ['name', 'mime_type', 'content'])

ATTACHMENTS = pytest.StashKey[list]()


def add_attachment(node, name, mime_type, content):
    """Queue raw bytes for the report of the given pytest item."""
    if isinstance(content, str):
        content = content.encode('utf-8')
    node.stash.setdefault(ATTACHMENTS, []).append(Attachment(name, mime_type, content))


def add_text_attachment(node, name, content, mime_type='text/plain'):
    add_attachment(node, name, mime_type, content)


def add_json_attachment(node, name, data):
    if not isinstance(data, str):
        data = json.dumps(data, indent=2, default=str)
    add_attachment(node, name, 'application/json', data)


def add_log_attachment(node, name, log_content):
    add_attachment(node, name, 'text/plain', log_content)


def pending_attachments(node):
    return list(node.stash.get(ATTACHMENTS, []))


def to_html_extra(extras, attachment):
    """Convert one attachment into a pytest-html extra."""
    if attachment.mime_type.startswith('image/'):
        encoded = base64.b64encode(attachment.content).decode('ascii')
        extension = attachment.mime_type.split('/', 1)[1]
        return extras.image(encoded, name=attachment.name,
                            mime_type=attachment.mime_type, extension=extension)
    text = attachment.content.decode('utf-8', errors='replace')
    if attachment.mime_type == 'application/json':
        return extras.json(json.loads(text), name=attachment.name)
    return extras.text(text, name=attachment.name)


def attach_to_report(item, report, logger):
    """
    Move the item's queued attachments onto the report being built.

    Does nothing when pytest-html is not active. Each attachment that cannot
    be converted is logged and skipped.
    """
    queued = item.stash.get(ATTACHMENTS, [])
    if not queued:
        return
    html_plugin = item.config.pluginmanager.getplugin('html')
    if html_plugin is None:
        return

    report_extras = getattr(report, 'extras', [])
    while queued:
        attachment = queued.pop(0)
        try:
            report_extras.append(to_html_extra(html_plugin.extras, attachment))
        except Exception:
            logger.warning("Failed to add attachment to report",
                           attachment=attachment.name, exc_info=True)
    report.extras = report_extras


@contextmanager
def step(name, logger):
    """Log a named test step; failures inside it are logged and re-raised."""
    logger.info("Step", step=name)
    try:
        yield
    except Exception as exc:
        logger.error("Step failed", step=name, error=str(exc))
        raise
