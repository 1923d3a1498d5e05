"""
Line configuration model.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Dict, Any

from models.line_status import DELAYED, SUSPENDED

# Keyword fragments that mean trains are not running at all
SUSPENSION_TERMS = ('運休', '見合', '取りやめ', '運転中止')


@dataclass(frozen=True)
class KeywordRule:
    """A disruption keyword and the status it maps to."""

    keyword: str
    severity: str = DELAYED

    @classmethod
    def from_value(cls, value: Any) -> 'KeywordRule':
        """
        Build a rule from a config entry.

        Entries are either a bare keyword or a mapping with ``keyword`` and
        an optional ``severity``. Bare keywords get their severity from
        SUSPENSION_TERMS.
        """
        if isinstance(value, dict):
            keyword = str(value.get('keyword', '')).strip()
            severity = value.get('severity') or infer_severity(keyword)
        else:
            keyword = str(value).strip()
            severity = infer_severity(keyword)

        if severity not in (DELAYED, SUSPENDED):
            raise ValueError(f"Invalid severity '{severity}' for keyword '{keyword}'")
        if not keyword:
            raise ValueError("Empty disruption keyword")

        return cls(keyword=keyword, severity=severity)


def infer_severity(keyword: str) -> str:
    """Return 'suspended' for keywords describing no service, else 'delayed'."""
    if any(term in keyword for term in SUSPENSION_TERMS):
        return SUSPENDED
    return DELAYED


@dataclass(frozen=True)
class LineConfig:
    """Static configuration for one monitored line."""

    key: str
    name: str
    operator: str
    url: str
    name_en: Optional[str] = None
    method: str = 'http'
    disruption_rules: Tuple[KeywordRule, ...] = field(default_factory=tuple)
    normal_keywords: Tuple[str, ...] = field(default_factory=tuple)
    boilerplate_phrases: Tuple[str, ...] = field(default_factory=tuple)
    silence_is_normal: bool = False
    selector: Optional[str] = None

    @classmethod
    def from_dict(cls, key: str, data: Dict[str, Any]) -> 'LineConfig':
        """Create LineConfig from a lines.yaml entry."""
        return cls(
            key=key,
            name=data.get('name', key),
            operator=data.get('operator', ''),
            url=data.get('url', ''),
            name_en=data.get('name_en'),
            method=data.get('method', 'http'),
            disruption_rules=tuple(
                KeywordRule.from_value(v) for v in _as_list(data, 'disruption_keywords')
            ),
            normal_keywords=_string_tuple(data, 'normal_keywords'),
            boilerplate_phrases=_string_tuple(data, 'boilerplate_phrases'),
            silence_is_normal=bool(data.get('silence_is_normal', False)),
            selector=data.get('selector') or None,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'key': self.key,
            'name': self.name,
            'name_en': self.name_en,
            'operator': self.operator,
            'url': self.url,
            'method': self.method,
            'disruption_keywords': [
                {'keyword': r.keyword, 'severity': r.severity} for r in self.disruption_rules
            ],
            'normal_keywords': list(self.normal_keywords),
            'boilerplate_phrases': list(self.boilerplate_phrases),
            'silence_is_normal': self.silence_is_normal,
            'selector': self.selector,
        }


def _as_list(data: Dict[str, Any], name: str) -> list:
    """A list-valued config field; a bare string is rejected, not split."""
    value = data.get(name)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{name}' must be a list, got {type(value).__name__}")
    return value


def _string_tuple(data: Dict[str, Any], name: str) -> Tuple[str, ...]:
    """A list of non-empty phrases; an empty phrase would match every page."""
    phrases = []
    for value in _as_list(data, name):
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"'{name}' entries must be non-empty strings, got {value!r}")
        phrases.append(value.strip())
    return tuple(phrases)
