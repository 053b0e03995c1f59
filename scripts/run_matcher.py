# scripts/run_matcher.py
import argparse
from career_match.main import run


def main():
    parser = argparse.ArgumentParser(description="Rank job postings for one candidate profile.")
    parser.add_argument("--config", default="config/config.yaml")
    args = parser.parse_args()
    run(args.config)


if __name__ == "__main__":
    main()
