"""Test fixtures for Image Tag Policy.

This module provides shared fixtures used across multiple test modules.

Fixtures:
    policy_manifest: Creates a temporary workload manifest with tag annotations
    clean_env: Provides an empty os.environ for CLI tests
"""

import os

import pytest
import yaml


@pytest.fixture
def policy_manifest(tmp_path):
    """Creates a temporary workload manifest carrying tag pattern annotations.

    Args:
        tmp_path (Path): Built-in pytest fixture providing a temporary directory path

    Returns:
        dict: A dictionary containing:
            - path (Path): Path to the manifest file
            - data (dict): The manifest content
    """
    data = {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {
            "name": "test-app",
            "annotations": {
                "fluxcd.io/automated": "true",
                "fluxcd.io/tag.api": "semver:~1.2",
                "fluxcd.io/tag.worker": "glob:production-*",
                "fluxcd.io/tag.broken": "semver:not-a-constraint",
            },
        },
    }
    path = tmp_path / "deployment.yaml"
    with path.open("w", encoding="utf-8") as f:
        yaml.dump(data, f)

    return {"path": path, "data": data}


@pytest.fixture
def clean_env():
    """Clears os.environ for the duration of a test and restores it afterwards."""
    orig_env = os.environ.copy()
    os.environ.clear()

    yield os.environ

    os.environ.clear()
    os.environ.update(orig_env)
