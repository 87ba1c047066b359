"""Rule flag bundle shared by the game driver, players and configuration."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RuleFlags:
    bounce: bool = False
    missing_teeth: bool = False
    wrap: bool = False

    @classmethod
    def from_settings(cls, settings):
        """Read the `rules:` mapping of settings.yaml (missing keys default to off)."""
        rules = settings.get("rules") or {}
        return cls(
            bounce=bool(rules.get("bounce", False)),
            missing_teeth=bool(rules.get("missing_teeth", False)),
            wrap=bool(rules.get("wrap", False)),
        )

    def as_args(self):
        """Positional (bounce, missing_teeth, wrap) for engine calls."""
        return (self.bounce, self.missing_teeth, self.wrap)

    def describe(self):
        enabled = [name for name, on in (("bounce", self.bounce), ("missing-teeth", self.missing_teeth), ("wrap", self.wrap)) if on]
        return ", ".join(enabled) if enabled else "standard"
