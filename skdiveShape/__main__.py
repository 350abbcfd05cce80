import sys
import logging
import argparse
from skdiveShape import analyze


def main():
    _DESCRIPTION = "Categorize dive shapes, given a configuration file"
    _FORMATERCLASS = argparse.ArgumentDefaultsHelpFormatter
    parser = argparse.ArgumentParser(description=_DESCRIPTION,
                                     formatter_class=_FORMATERCLASS)
    parser.add_argument("--config-file",
                        help="Path to JSON configuration file.")
    parser.add_argument("--output",
                        help="Path to CSV file for dive statistics.")
    parser.add_argument("tdr_file",
                        help="Path to NetCDF or Lotek CSV TDR data file.")
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO)
    tdr = analyze(args.tdr_file, args.config_file)
    stats = tdr.dive_stats()
    if args.output is None:
        stats.to_csv(sys.stdout)
    else:
        stats.to_csv(args.output)
    return(0)


sys.exit(main())
