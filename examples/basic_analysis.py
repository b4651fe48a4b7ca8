"""
Basic usage example for CSV Analyzer.

This script demonstrates how to:
1. Load configuration
2. Load a CSV file
3. Profile it (type inference + statistics)
4. Generate reports
"""

from csv_analyzer import CSVLoader, TableProfiler, ConfigLoader, ReportGenerator
from csv_analyzer.loaders import create_sample_data

def main():
    # Load configuration
    config = ConfigLoader()

    # Create the sample product dataset to analyze
    csv_path = create_sample_data("sample_data.csv")

    # Load the table
    loader = CSVLoader(**config.get_loader_config())
    table = loader.load(csv_path)

    # Infer column types and compute statistics
    profiler = TableProfiler(**config.get_analysis_config())
    print(f"Analyzing {csv_path}...")
    profile = profiler.profile_table(table)

    # Print the report and write files
    report_gen = ReportGenerator(output_dir="./reports")
    print(report_gen.render_text(profile))
    report_files = report_gen.generate_report(profile, formats=['json', 'html'])

    print(f"\n✅ Analysis complete!")
    print(f"Reports generated:")
    for fmt, path in report_files.items():
        print(f"  - {fmt.upper()}: {path}")

    # Access specific results
    single_value = [s for s in profile['statistics'] if s.std_dev is None]
    if single_value:
        print(f"\nColumns with a single value (no standard deviation):")
        for stat in single_value:
            print(f"  - {stat.name}")

if __name__ == '__main__':
    main()
