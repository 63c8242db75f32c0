"""Capstone companion: template-driven capstone project generator and writing assistant."""
