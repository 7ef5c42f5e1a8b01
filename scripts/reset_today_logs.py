#!/usr/bin/env python3
"""
Delete all of today's attendance logs from Firestore.
Authenticates with the Firebase CLI refresh token (run `npx firebase-tools login` first).
Run from the project root:
  python3 scripts/reset_today_logs.py
"""

import sys
from pathlib import Path
from dotenv import load_dotenv

# Load .env from project root
load_dotenv(dotenv_path=Path(__file__).parent.parent / ".env")

sys.path.insert(0, str(Path(__file__).parent.parent))

from backend.attendance_reset.reset import main

if __name__ == "__main__":
    sys.exit(main())
