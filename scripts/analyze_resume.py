# scripts/analyze_resume.py
#!/usr/bin/env python3
"""
Analyze a resume without installing the package

Usage:
    python scripts/analyze_resume.py data/resume.txt --job data/job.txt
    python scripts/analyze_resume.py data/resume.txt --mode realtime --ai
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from resume_analyzer.cli import main


if __name__ == '__main__':
    sys.exit(main())
