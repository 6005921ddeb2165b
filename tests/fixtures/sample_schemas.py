"""Sample schema documents for tests.

Keys of SCHEMA_DOCUMENTS are paths relative to a schema root. The type
graph is small but complete: a string enum, objects with optional
properties, a reference into another document and a nested module path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

EVSE_MANAGER_INTERFACE: dict[str, Any] = {
    "description": "EVSE manager",
    "cmds": {
        "get_state": {
            "description": "Returns the current charging state",
            "result": {
                "description": "Current state",
                "type": "string",
                "$ref": "/evse#/State",
            },
        },
        "set_limits": {
            "description": "Applies new current limits",
            "arguments": {
                "limits": {
                    "description": "New limits",
                    "type": "object",
                    "$ref": "/evse#/Limits",
                },
                "phase_count": {"type": "integer"},
            },
        },
    },
    "vars": {
        "session_event": {
            "description": "Emitted on every session change",
            "type": "object",
            "$ref": "/evse#/SessionEvent",
        },
        "max_current": {
            "description": "Currently granted maximum current",
            "type": "number",
        },
    },
}

BOARD_SUPPORT_INTERFACE: dict[str, Any] = {
    "description": "Board support package",
    "cmds": {
        "enable": {
            "description": "Enables or disables the power path",
            "arguments": {"value": {"type": "boolean"}},
        },
    },
    "vars": {
        "telemetry": {
            "description": "Board telemetry",
            "type": "object",
            "$ref": "/board/support#/Telemetry",
        },
    },
}

EVSE_TYPES: dict[str, Any] = {
    "description": "EVSE types",
    "types": {
        "State": {
            "description": "Charging state",
            "type": "string",
            "enum": ["Idle", "Charging"],
        },
        "Limits": {
            "description": "Current limits",
            "type": "object",
            "required": ["max_current"],
            "properties": {
                "max_current": {"type": "number"},
                "phases": {"type": "integer"},
            },
        },
        "SessionEvent": {
            "description": "A session event",
            "type": "object",
            "required": ["state"],
            "properties": {
                "state": {"type": "string", "$ref": "/evse#/State"},
                "meter": {"type": "object", "$ref": "/powermeter#/Powermeter"},
            },
        },
    },
}

POWERMETER_TYPES: dict[str, Any] = {
    "description": "Powermeter types",
    "types": {
        "Powermeter": {
            "type": "object",
            "required": ["energy_Wh_import"],
            "properties": {
                "energy_Wh_import": {"type": "number"},
                "timestamp": {"type": "string"},
                "phase_currents": {"type": "array", "items": {"type": "number"}},
            },
        },
    },
}

BOARD_SUPPORT_TYPES: dict[str, Any] = {
    "description": "Board support types",
    "types": {
        "Telemetry": {
            "type": "object",
            "required": ["temperature"],
            "properties": {
                "temperature": {"type": "number"},
                "extra": {"type": "object"},
            },
        },
    },
}

SCHEMA_DOCUMENTS: dict[str, dict[str, Any]] = {
    "interfaces/evse_manager.yaml": EVSE_MANAGER_INTERFACE,
    "interfaces/board_support.yaml": BOARD_SUPPORT_INTERFACE,
    "types/evse.yaml": EVSE_TYPES,
    "types/powermeter.yaml": POWERMETER_TYPES,
    "types/board/support.yaml": BOARD_SUPPORT_TYPES,
}

MANIFEST: dict[str, Any] = {
    "description": "EVSE manager module",
    "metadata": {
        "license": "https://opensource.org/licenses/Apache-2.0",
        "authors": ["Jane Doe"],
    },
    "provides": {
        "main": {
            "interface": "evse_manager",
            "description": "EVSE manager implementation",
            "config": {
                "connector_id": {
                    "type": "integer",
                    "description": "Connector number",
                    "default": 1,
                    "minimum": 1,
                    "maximum": 8,
                },
            },
        },
    },
    "requires": {
        "bsp": {"interface": "board_support"},
    },
    "config": {
        "debug_mode": {"type": "boolean", "default": False},
        "serial_port": {"type": "string", "default": "/dev/ttyUSB0"},
    },
}

MINIMAL_MANIFEST: dict[str, Any] = {
    "description": "Minimal module",
    "metadata": {"license": "MIT", "authors": []},
    "provides": {
        "main": {"interface": "evse_manager", "description": "Main implementation"},
    },
}

# A reference cycle across two documents: Node -> Leaf -> Node, plus a self loop.
CYCLIC_DOCUMENTS: dict[str, dict[str, Any]] = {
    "interfaces/graph.yaml": {
        "description": "Graph walker",
        "vars": {
            "root": {"type": "object", "$ref": "/graph#/Node"},
        },
    },
    "types/graph.yaml": {
        "description": "Graph types",
        "types": {
            "Node": {
                "type": "object",
                "properties": {
                    "next": {"type": "object", "$ref": "/graph#/Node"},
                    "leaves": {
                        "type": "array",
                        "items": {"type": "object", "$ref": "/graph/leaf#/Leaf"},
                    },
                },
            },
        },
    },
    "types/graph/leaf.yaml": {
        "description": "Leaf types",
        "types": {
            "Leaf": {
                "type": "object",
                "required": ["parent"],
                "properties": {
                    "parent": {"type": "object", "$ref": "/graph#/Node"},
                },
            },
        },
    },
}


def write_documents(root: Path, documents: dict[str, dict[str, Any]]) -> Path:
    """Write documents as YAML under `root`, keeping key order; return `root`."""
    for relative, content in documents.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(yaml.safe_dump(content, sort_keys=False))
    return root


def write_manifest(path: Path, content: dict[str, Any] | None = None) -> Path:
    """Write a manifest (MANIFEST by default) and return its path."""
    path.write_text(yaml.safe_dump(MANIFEST if content is None else content, sort_keys=False))
    return path
