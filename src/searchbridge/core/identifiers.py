"""Product identifier extraction from provider result records.

Provider deployments key product ids on different fields, sometimes nested.
The configured rule source is compiled once as a JMESPath expression::

    rule = compile_identifier_rule("attributes.sku")
    rule.extract({"attributes": {"sku": "A1"}})  # "A1"

A source that does not compile (for example ``"product-id"``) falls back to
being used verbatim as a top-level field name.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import jmespath
from jmespath.exceptions import JMESPathError
from jmespath.parser import ParsedResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldPath:
    """Look the identifier up as a single top-level field."""

    name: str

    def extract(self, record: dict[str, Any]) -> Any:
        return record.get(self.name)


@dataclass(frozen=True)
class CompiledExpression:
    """Evaluate a compiled JMESPath expression against the record."""

    source: str
    expression: ParsedResult

    def extract(self, record: dict[str, Any]) -> Any:
        try:
            return self.expression.search(record)
        except Exception:
            logger.error(
                "Doofinder product id is not found: expression=%s record=%r",
                self.source,
                record,
                exc_info=True,
            )
            return None


IdentifierRule = FieldPath | CompiledExpression


def compile_identifier_rule(source: str) -> IdentifierRule:
    """Compile ``source`` into an identifier rule.

    Compilation failures are logged and degrade to ``FieldPath(source)``.
    """
    try:
        return CompiledExpression(source=source, expression=jmespath.compile(source))
    except JMESPathError:
        logger.error("Doofinder productIdKey expression is broken: %r", source, exc_info=True)
        return FieldPath(source)
