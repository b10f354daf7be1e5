"""Default rule file written on first run."""

DEFAULT_RULES_TEXT = """\
# tmexclude rules
#
# Each line pairs a directory name with a sentinel file name:
#
#     <directory name> <sentinel file name>
#
# A directory is excluded from Time Machine backups when its name matches
# and the sentinel file exists next to it, in the same parent directory.
# Lines starting with # and blank lines are ignored. The same directory
# name may appear several times; any matching sentinel is enough.

# Swift
.build Package.swift

# Gradle
.gradle build.gradle
.gradle build.gradle.kts
build build.gradle
build build.gradle.kts

# Dart / Flutter
.dart_tool pubspec.yaml
.packages pubspec.yaml

# Haskell (Stack)
.stack-work stack.yaml

# Python
.tox tox.ini
.nox noxfile.py
.venv requirements.txt
.venv pyproject.toml
venv requirements.txt
venv pyproject.toml
__pypackages__ pyproject.toml

# Vagrant
.vagrant Vagrantfile

# Carthage / CocoaPods
Carthage Cartfile
Pods Podfile

# JavaScript
bower_components bower.json
node_modules package.json
.parcel-cache package.json
.next next.config.js

# Rust / Maven / sbt
target Cargo.toml
target pom.xml
target build.sbt
target plugins.sbt

# PHP / Go / Ruby
vendor composer.json
vendor go.mod
vendor Gemfile

# Elixir
deps mix.exs

# Terraform / CDK / Terragrunt
.terraform main.tf
cdk.out cdk.json
.terragrunt-cache terragrunt.hcl
"""
