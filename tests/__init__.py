# leaseline Test Suite
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
leaseline test suite.

Unit tests mirror the package layout; integration tests cover invariants
that span the resolver, revenue calculator and classifier.
"""
