# json_workbench/application/repair/__init__.py

"""Repair engine for malformed JSON-like text"""

# Local imports
from json_workbench.application.repair._repairer import JsonRepairer
from json_workbench.application.repair._repairer import can_repair_json
from json_workbench.application.repair._repairer import repair_json

__all__ = ["JsonRepairer", "can_repair_json", "repair_json"]
