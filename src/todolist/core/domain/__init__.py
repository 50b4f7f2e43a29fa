"""
Domain Models and Business Logic

This package contains the core of the todo list:
- Task / TaskList / ContractInfo records
- TodoStore, the state-transition logic for add, toggle, remove and list
- The error taxonomy shared by every layer
"""
