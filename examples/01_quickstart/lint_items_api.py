"""
Quickstart: lint an API document from Python.

Run from this directory:
    python lint_items_api.py

The same check from the shell:
    swaglint --input items_api.json --config .swaglint.yml
"""

from pathlib import Path

from swaglint import ContractValidator, load_config, load_document

HERE = Path(__file__).parent

document = load_document(HERE / "items_api.json")

# Default rules
report = ContractValidator().validate(document)
print(f"Default rules: {report.total} violation(s)")
for resource, messages in report.as_dict().items():
    print(resource)
    for message in messages:
        print(f"  {message}")

# With the project configuration
config = load_config(HERE / ".swaglint.yml")
report = ContractValidator(config).validate(document)
print(f"\nWith .swaglint.yml: {report.total} violation(s)")

# Violations keep the rule that produced them
for violation in report.violations.get("/items", []):
    print(f"  [{violation.rule_name}] {violation.verb}: {violation.message}")
