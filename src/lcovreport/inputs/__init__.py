from lcovreport.inputs.coverage_json import load_coverage_file, parse_coverage_data

__all__ = ["load_coverage_file", "parse_coverage_data"]
