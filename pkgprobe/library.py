from dataclasses import dataclass


@dataclass(frozen=True)
class Library:
    """What pkg-config reported for one library."""

    libs: tuple[str, ...] = ()
    link_paths: tuple[str, ...] = ()
    frameworks: tuple[str, ...] = ()
    framework_paths: tuple[str, ...] = ()
    include_paths: tuple[str, ...] = ()

    def summary_lines(self):
        """Human readable lines for the CLI, one per non-empty field."""
        lines = []
        for label, values in (
            ("libs", self.libs),
            ("link paths", self.link_paths),
            ("frameworks", self.frameworks),
            ("framework paths", self.framework_paths),
            ("include paths", self.include_paths),
        ):
            if values:
                lines.append(f"{label}: {' '.join(values)}")
        return lines
