"""Fixed header, style and footer blocks of the class diagram document."""

START_MARKER = "@startuml"
END_MARKER = "@enduml"
RELATIONSHIPS_HEADER = "' Relationships"
CLICKABLE = "<<Clickable>>"

CONFIGURATION_BLOCK = [
    "' Configuration",
    "hide empty members",
    "skinparam shadowing false",
    "skinparam handwritten false",
    "skinparam monochrome false",
    "skinparam linetype ortho",
]


def _entity_style(kind: str, background: str, border: str, header: str) -> list[str]:
    return [
        f"skinparam {kind} {{",
        f"    BackgroundColor{CLICKABLE} {background}",
        f"    BorderColor{CLICKABLE} {border}",
        f"    HeaderBackgroundColor{CLICKABLE} {header}",
        "    FontSize 12",
        "    AttributeFontSize 11",
        "    AttributeFontColor #333333",
        "    BorderThickness 1",
        "}",
    ]


CLASS_STYLE_BLOCK = _entity_style("class", "#E3F2FD", "#1976D2", "#BBDEFB")
INTERFACE_STYLE_BLOCK = _entity_style("interface", "#F1F8E9", "#689F38", "#DCEDC8")

ARROW_STYLE_BLOCK = [
    "skinparam arrow {",
    "    Color #666666",
    "    FontSize 11",
    "    Thickness 1",
    "}",
]
