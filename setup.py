from setuptools import find_packages, setup
from setuptools.command.install import install
import shutil
import sys


class InstallHoiRun(install):
    """Install hoirun and report missing external tools."""

    def run(self):
        super().run()

        missing = [tool for tool in ("puppet", "hiera", "facter") if shutil.which(tool) is None]
        if missing:
            print(
                f"\n⚠  Not found in PATH: {', '.join(missing)}. "
                "hoirun delegates every run to these tools.",
                file=sys.stderr,
            )


setup(
    name="hoirun",
    version="0.3.0",
    description="Local puppet/hiera run harness with throw-away build directories",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src", include=["hoirun", "hoirun.*"]),
    install_requires=["PyYAML>=6.0"],
    extras_require={"test": ["pytest>=7"]},
    entry_points={"console_scripts": ["hoirun=hoirun.cli:main"]},
    cmdclass={"install": InstallHoiRun},
)
