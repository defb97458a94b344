"""
Report generation utilities.
Creates human-readable and machine-readable package reports.
"""
import csv
from datetime import datetime

from sat_package_reader.core.models import CfdiPackageSnapshot, PackageSnapshot
from sat_package_reader.core.readers import CfdiPackageReader


def generate_summary_report(snapshot: PackageSnapshot) -> str:
    """
    Generate text summary report from a package snapshot.

    Args:
        snapshot: Snapshot of an opened package

    Returns:
        Formatted text report
    """
    lines = []

    # Header
    lines.append("=" * 70)
    lines.append("SAT PACKAGE REPORT")
    lines.append("=" * 70)
    lines.append(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append(f"Source:    {snapshot.source}")
    lines.append("")

    lines.append("FILES")
    lines.append("-" * 70)
    lines.append(f"Total Files:               {snapshot.file_count}")
    for name, content in snapshot.files.items():
        lines.append(f"  {name} ({len(content)} bytes)")
    lines.append("")

    if isinstance(snapshot, CfdiPackageSnapshot):
        lines.append("DOCUMENTS")
        lines.append("-" * 70)
        lines.append(f"Identified Documents:      {len(snapshot.documents)}")
        lines.append(f"Files Without UUID:        {snapshot.unidentified_files}")
        for uuid in snapshot.documents:
            lines.append(f"  {uuid}")
        lines.append("")

    # Footer
    lines.append("=" * 70)
    lines.append("END OF REPORT")
    lines.append("=" * 70)

    return "\n".join(lines)


def generate_csv_report(reader: CfdiPackageReader, output_path: str):
    """
    Generate CSV report with one row per CFDI document.

    Args:
        reader: Opened CFDI package
        output_path: Path to output CSV file
    """
    with open(output_path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)

        writer.writerow(['File Name', 'UUID', 'Size (bytes)'])

        for name, content in reader.documents():
            writer.writerow([
                name,
                reader.obtain_uuid_from_xml_cfdi(content),
                len(content)
            ])


def generate_json_report(snapshot: PackageSnapshot, output_path: str):
    """
    Generate JSON report.

    Args:
        snapshot: Package snapshot
        output_path: Output file path
    """
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(snapshot.model_dump_json(indent=2))
