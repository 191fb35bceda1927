"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

- Domain says: "I need to store threads and comments"
- Infrastructure implements: "I'll use PostgreSQL through Prisma"

Subfolders:
- repositories/  → Data persistence interfaces
"""
