# resume_analyzer/cli.py
"""
Analyze a plain-text resume from the command line

Usage:
    resume-analyzer data/resume.txt
    resume-analyzer data/resume.txt --job data/job.txt --ai
    resume-analyzer data/resume.txt --job data/job.txt --json --output reports/analysis.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from resume_analyzer.analyzer import MODES, ResumeAnalyzer
from resume_analyzer.config import AnalyzerConfig, get_config
from resume_analyzer.exceptions import ResumeAnalyzerError
from resume_analyzer.models import AIResult, AnalysisResult

logger = logging.getLogger(__name__)


def read_text(path: str) -> str:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return file_path.read_text(encoding='utf-8')


def print_summary(result: AnalysisResult):
    """Print formatted score summary"""
    print("\n" + "=" * 70)
    print(f"{'RESUME ANALYSIS':^70}")
    print("=" * 70)
    print()

    color = (
        '\033[92m' if result.total_score >= 80 else   # Green
        '\033[93m' if result.total_score >= 65 else   # Yellow
        '\033[91m'                                    # Red
    )
    reset = '\033[0m'

    print(f"Total Score: {color}{result.total_score}/100{reset} (Grade {result.grade})")
    print(f"ATS Compatibility: {result.ats_score}/100")
    print(f"Industry: {result.industry} ({result.industry_score}/100)")
    print()

    components = [
        ("Keywords", result.keyword_score),
        ("Grammar", result.grammar_score),
        ("Formatting", result.formatting_score),
        ("Sections", result.section_score),
        ("Action Verbs", result.action_verb_score),
        ("Relevance", result.relevance_score),
        ("Bullet Points", result.bullet_point_score),
        ("Tone", result.language_tone_score),
        ("Length", result.length_score),
    ]

    print("Component Breakdown:")
    for label, value in components:
        print(f"  {label + ':':<15}{value:3}/100  {'█' * (value // 10)}")
    print()


def print_issues(result: AnalysisResult, limit: int = 10):
    """Print top-ranked issues"""
    if not result.suggestion_list:
        return

    print("=" * 70)
    print("TOP ISSUES")
    print("=" * 70)
    print()

    for i, issue in enumerate(result.suggestion_list[:limit], 1):
        print(f"{i:2}. [{issue.severity.value.upper()}] {issue.description}")
        print(f"    → {issue.suggestion}")
    print()


def print_sections(result: AnalysisResult):
    """Print section heatmap"""
    if not result.section_heatmap:
        return

    print("=" * 70)
    print("SECTIONS")
    print("=" * 70)
    print()

    for cell in result.section_heatmap:
        marker = '★' if cell.weight > 1 else ' '
        print(f"  {marker} {cell.name:<16}{cell.score:3}/100  {'█' * (cell.score // 10)}")
    print()


def print_ats(result: AnalysisResult):
    """Print failed ATS checks"""
    if not result.ats_details.issues:
        return

    print("=" * 70)
    print("ATS CHECKS")
    print("=" * 70)
    print()

    for issue in result.ats_details.issues:
        print(f"  ✗ {issue.description} (-{issue.impact})")
        print(f"    → {issue.solution}")
    print()


def print_recommendations(result: AnalysisResult):
    print("=" * 70)
    print("RECOMMENDATIONS")
    print("=" * 70)
    print()

    for i, recommendation in enumerate(result.industry_recommendations, 1):
        print(f"  {i}. {recommendation}")
    print()

    if result.ai_suggestions:
        print("AI Suggestions:")
        for suggestion in result.ai_suggestions:
            print(f"  • {suggestion.text}")
        print()


def print_ai_result(result: AIResult):
    print(f"\nAI Score: {result.ai_score}/100 ({result.provider})")
    for i, suggestion in enumerate(result.ai_suggestions, 1):
        print(f"  {i}. {suggestion.text}")
    if not result.ai_suggestions:
        print("  No AI suggestions available (provider disabled or unreachable)")
    print()


def write_output(content: str, output_file: str):
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding='utf-8')
    print(f"\n✓ Report saved to: {output_file}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Score a plain-text resume and suggest improvements'
    )

    parser.add_argument('resume', help='Path to resume text file')
    parser.add_argument('--job', help='Path to job description text file')
    parser.add_argument('--mode', choices=MODES, default='full', help='Analysis mode')
    parser.add_argument('--config', help='Path to analyzer YAML config')
    parser.add_argument('--ai', action='store_true', help='Request AI suggestions from the configured LLM')
    parser.add_argument('--json', action='store_true', help='Print the result as JSON')
    parser.add_argument('--output', help='Also write the JSON result to this file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose logging')

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = AnalyzerConfig.from_yaml(args.config) if args.config else get_config()
        if args.ai:
            config.ai.enabled = True

        resume_text = read_text(args.resume)
        job_text = read_text(args.job) if args.job else None

        analyzer = ResumeAnalyzer(config=config)
        result = analyzer.run(
            resume_text,
            job_text,
            file_name=Path(args.resume).name,
            mode=args.mode
        )

        if isinstance(result, AIResult):
            payload = result.to_dict()
            if args.json:
                print(json.dumps(payload, indent=2, ensure_ascii=False))
            else:
                print_ai_result(result)
            return 0

        if args.json:
            print(result.to_json(indent=2))
        else:
            print_summary(result)
            print_issues(result)
            print_sections(result)
            print_ats(result)
            print_recommendations(result)

        if args.output:
            write_output(result.to_json(indent=2), args.output)

        return 0

    except (ResumeAnalyzerError, FileNotFoundError) as e:
        logger.error(f"ERROR: {e}")
        return 2


if __name__ == '__main__':
    sys.exit(main())
