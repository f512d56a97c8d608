# Models package init
"""
Rocks API — Data Models
=========================

What:  The service's in-memory data: the rock collection and the calculator
       operator enumeration.
Why:   Nothing is persisted, so "models" here are plain Python constants and
       enums rather than ORM classes.
"""
