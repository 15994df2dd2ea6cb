# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Decoding of report download error envelopes.

On HTTP 400 the report download API answers with an XML document::

    <?xml version="1.0" encoding="UTF-8" standalone="yes"?>
    <reportDownloadError>
        <ApiError>
            <type>ReportDefinitionError.CUSTOMER_SERVING_TYPE_REPORT_MISMATCH</type>
            <trigger></trigger>
            <fieldPath>selector</fieldPath>
        </ApiError>
    </reportDownloadError>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass

from ..core.errors import MissingDataSourceError

_API_ERROR_TAGS = ("ApiError", "APIError")


@dataclass(frozen=True)
class _ApiError:
    type: str = ""
    trigger: str = ""
    field_path: str = ""

    def __str__(self) -> str:
        if self.field_path == "":
            if self.trigger == "":
                return self.type
            return f"{self.type} ({self.trigger})"
        if self.field_path == "selector":
            return self.type
        return f"{self.type} on {self.field_path}"


def _text(parent: ET.Element, tag: str) -> str:
    el = parent.find(tag)
    if el is None or el.text is None:
        return ""
    return el.text.strip()


def _parse_api_error(data: bytes) -> _ApiError:
    """
    Parse an XML report download error.

    :raises MissingDataSourceError: If ``data`` is empty.
    :raises xml.etree.ElementTree.ParseError: If ``data`` is not well-formed XML.
    """
    if not data:
        raise MissingDataSourceError()
    root = ET.fromstring(data)
    node = root
    for tag in _API_ERROR_TAGS:
        found = root.find(tag)
        if found is not None:
            node = found
            break
    return _ApiError(
        type=_text(node, "type"),
        trigger=_text(node, "trigger"),
        field_path=_text(node, "fieldPath"),
    )


def decode_api_error(data: bytes) -> str:
    """
    Return the human readable message of an XML report download error.

    :param data: Raw response body.
    :type data: bytes
    :return: ``type``, ``type (trigger)`` or ``type on fieldPath``.
    :rtype: str
    :raises MissingDataSourceError: If ``data`` is empty.
    :raises xml.etree.ElementTree.ParseError: If ``data`` is not well-formed XML.
    """
    return str(_parse_api_error(data))
