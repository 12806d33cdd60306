"""
Utility modules for ngs_integrity.

Provides:
    - formats: FileType, CodingType and Severity enums
    - tools: external tool resolution and execution
    - sampling: scratch files, head-line and tail-byte sampling
    - settings: Base settings class with immutable update pattern
"""
