from pathlib import Path
from setuptools import setup, find_packages

BASE_DIR = Path(__file__).parent


def _requirements(file_name: str):
    lines = (BASE_DIR / file_name).read_text().splitlines()
    return [_l.strip() for _l in lines if _l.strip() and not _l.startswith("#")]


# ----------------------------------------------------------------------
# Core version & requirements (the library itself)
# ----------------------------------------------------------------------
version = (BASE_DIR / ".version").read_text().strip()
long_description = (BASE_DIR / "README.md").read_text(encoding="utf-8")
requirements_lib = _requirements("requirements_lib.txt")

# ----------------------------------------------------------------------
# API‑specific requirements
# ----------------------------------------------------------------------
requirements_api = _requirements("requirements.txt")

# ----------------------------------------------------------------------
# Extras handling
# ----------------------------------------------------------------------
extras = {
    "api": requirements_api,
    "test": requirements_api + ["pytest>=7.4"],
}

# ----------------------------------------------------------------------
setup(
    name="lmt-proxy",
    version=version,
    description="LMT proxy – translation pipeline library with optional REST API",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="Apache-2.0",
    packages=find_packages(
        where=".",
        include=[
            "lmt_proxy_lib*",
            "lmt_proxy_api*",
        ],
        exclude=("tests", "docs"),
    ),
    python_requires=">=3.10",
    install_requires=requirements_lib,
    extras_require=extras,
    entry_points={
        "console_scripts": {
            "lmt-proxy-api=lmt_proxy_api.rest_api:main",
        }
    },
)
