"""
Request Builder for the YCLIENTS API Client

Turns typed per-call options into the flat parameter mapping sent to the
API, validates required fields of free-form maps, and encodes GET
parameters into a query string.
"""

import datetime as dt
import logging
from dataclasses import dataclass, field, fields, is_dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from ..core.error_handler import ValidationError
from .authentication import AuthMode

DATE_FORMAT = '%Y-%m-%d'
TIMESTAMP_FORMAT = '%Y-%m-%dT%H:%M:%S%z'

# Field kinds understood by ParameterBuilder
KIND_DATE = 'date'
KIND_TIMESTAMP = 'timestamp'
KIND_IDS = 'ids'
KIND_FLAG = 'flag'


class HttpMethod(str, Enum):
    GET = 'GET'
    POST = 'POST'
    PUT = 'PUT'
    DELETE = 'DELETE'


@dataclass(frozen=True)
class RequestSpec:
    """Everything needed to perform one API call"""
    path: str
    parameters: Dict[str, Any] = field(default_factory=dict)
    method: HttpMethod = HttpMethod.GET
    auth: AuthMode = field(default_factory=AuthMode.partner)


def param(wire: Optional[str] = None, kind: Optional[str] = None) -> Any:
    """
    Declare an optional request parameter on an options dataclass

    Args:
        wire: Key sent to the API, defaults to the field name
        kind: Serialization rule (date, timestamp, ids, flag)
    """
    return field(default=None, metadata={'wire': wire, 'kind': kind})


def format_date(value: Any) -> str:
    """Serialize a calendar date as YYYY-MM-DD"""
    if isinstance(value, (dt.date, dt.datetime)):
        return value.strftime(DATE_FORMAT)
    return str(value)


def format_timestamp(value: Any) -> str:
    """Serialize a point in time as ISO-8601 with a numeric offset"""
    if isinstance(value, dt.datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=dt.timezone.utc)
        return value.strftime(TIMESTAMP_FORMAT)
    if isinstance(value, dt.date):
        midnight = dt.datetime.combine(value, dt.time(), tzinfo=dt.timezone.utc)
        return midnight.strftime(TIMESTAMP_FORMAT)
    return str(value)


def join_path(*segments: Any) -> str:
    """Join path segments, dropping absent ones"""
    return '/'.join(str(segment) for segment in segments if segment is not None and segment != '')


class ParameterBuilder:
    """
    Builds request parameters from options dataclasses.

    Fields left as None never reach the parameter mapping. Field metadata
    set through ``param()`` controls the wire key and value serialization.
    """

    _SERIALIZERS = {
        KIND_DATE: format_date,
        KIND_TIMESTAMP: format_timestamp,
        KIND_IDS: lambda value: [int(item) for item in value],
        KIND_FLAG: bool,
    }

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def build(self, options: Any = None) -> Dict[str, Any]:
        """Translate an options dataclass into a parameter mapping"""
        if options is None:
            return {}
        if not is_dataclass(options):
            raise TypeError(f"Expected an options dataclass, got {type(options).__name__}")

        parameters: Dict[str, Any] = {}
        for option in fields(options):
            value = getattr(options, option.name)
            if value is None:
                continue

            kind = option.metadata.get('kind')
            if kind == KIND_FLAG and not value:
                continue

            serializer = self._SERIALIZERS.get(kind)
            parameters[option.metadata.get('wire') or option.name] = serializer(value) if serializer else value

        return parameters

    def merge(self, required: Mapping[str, Any], extra: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Required fields first, then the caller's extra fields on top"""
        merged = dict(required)
        if extra:
            overridden = [key for key in extra if key in merged]
            if overridden:
                self.logger.debug(f"Extra fields override required fields: {overridden}")
            merged.update(extra)
        return merged

    def require(self, data: Optional[Mapping[str, Any]], keys: Iterable[str], message: str):
        """
        Check that every key is present with a non-null value

        Raises:
            ValidationError: If any key is missing
        """
        data = data or {}
        missing = [key for key in keys if data.get(key) is None]
        if missing:
            self.logger.error(f"{message} Missing: {missing}")
            raise ValidationError(f"{message} Missing: {', '.join(missing)}")

    def require_each(self, items: Iterable[Mapping[str, Any]], keys: Iterable[str], message: str):
        """Apply ``require`` to every item of a sequence"""
        keys = list(keys)
        for item in items:
            self.require(item, keys, message)


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return '1' if value else '0'
    return str(value)


def _flatten(key: str, value: Any) -> Iterator[Tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            yield from _flatten(f'{key}[{sub_key}]', sub_value)
    elif isinstance(value, (list, tuple)):
        if all(not isinstance(item, (Mapping, list, tuple)) for item in value):
            for item in value:
                if item is not None:
                    yield f'{key}[]', _scalar(item)
        else:
            for index, item in enumerate(value):
                yield from _flatten(f'{key}[{index}]', item)
    else:
        yield key, _scalar(value)


def encode_query(parameters: Mapping[str, Any]) -> str:
    """
    Percent-encode parameters as a query string

    Arrays use the repeated ``key[]`` convention, maps use ``key[sub]`` and
    booleans are sent as 1/0.
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in parameters.items():
        pairs.extend(_flatten(key, value))
    return urlencode(pairs, safe='[]')
