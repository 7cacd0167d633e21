# tests/conftest.py
import os
import sys
import tempfile

# Ensure project root (containing resume_match/) is in sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "../"))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

# Keep test log files out of the working tree
os.environ.setdefault("LOG_DIRECTORY", tempfile.mkdtemp(prefix="resume_match_logs_"))

import pytest

from resume_match.config.logging_config import setup_logging
from resume_match.models.data_models import AnalysisResult, DocumentInput

# Ensure logging is initialized before any tests run
setup_logging()


@pytest.fixture
def sample_result_payload():
    """The JSON object a well-behaved model returns."""
    return {
        "matchPercentage": 87,
        "summary": "Strong fit",
        "matchingSkills": ["Python", "SQL"],
        "missingSkills": ["Kubernetes"],
        "improvementTips": ["Add cloud experience", "Quantify impact"],
        "jobTitleDetected": "Data Engineer",
    }


@pytest.fixture
def sample_result(sample_result_payload):
    return AnalysisResult.model_validate(sample_result_payload)


@pytest.fixture
def resume_text():
    return DocumentInput(text="Jane Doe\nData engineer with Python and SQL")


@pytest.fixture
def job_description_text():
    return DocumentInput(text="Data Engineer: Python, SQL, Kubernetes")
