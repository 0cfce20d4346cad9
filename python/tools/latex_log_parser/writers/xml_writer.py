"""
XML report writer.

This module provides functionality to write a log report to XML format.
"""

import xml.etree.ElementTree as ET
from pathlib import Path

from loguru import logger

from ..core.data_structures import LogReport


class XmlWriter:
    """Writer for XML output format."""

    def write(self, report: LogReport, output_path: Path) -> None:
        """Write the log report to an XML file."""
        root = ET.Element("LatexLog")
        metadata = ET.SubElement(root, "Metadata")
        ET.SubElement(metadata, "Source").text = report.source
        ET.SubElement(metadata, "ErrorCount").text = str(len(report.errors))
        ET.SubElement(metadata, "WarningCount").text = str(len(report.warnings))

        diagnostics_elem = ET.SubElement(root, "Diagnostics")
        for diag in report.diagnostics:
            diag_elem = ET.SubElement(diagnostics_elem, "Diagnostic", kind=diag.kind.value)
            diag_elem.text = diag.message

        tree = ET.ElementTree(root)
        tree.write(output_path, encoding="utf-8", xml_declaration=True)
        logger.info(f"XML output written to {output_path}")
