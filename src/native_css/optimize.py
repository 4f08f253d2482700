"""Default rule-list optimizer.

Downstream optimizers may reorder or merge the compiled rule list; the
default returns it unchanged.
"""

from __future__ import annotations

from native_css.model import StyleRuleSet


def optimize_rules(
    rules: list[tuple[str, StyleRuleSet]],
) -> list[tuple[str, StyleRuleSet]]:
    return list(rules)
