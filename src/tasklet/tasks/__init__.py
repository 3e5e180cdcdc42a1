"""
Task subsystem.

Components:
- task_models.py: the three task variants, date parsing, display/record forms
- task_list.py: ordered in-memory list addressed by 1-based position
- task_store.py: flat-file load/save of pipe-delimited records
"""
