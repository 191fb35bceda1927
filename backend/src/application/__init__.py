"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (add thread, add/delete comment)
- queries/   → Read operations (thread detail)
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Repository calls run one after another; each check gates the next
- Errors propagate untouched; translation happens in the presentation layer
"""
