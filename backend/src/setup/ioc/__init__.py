from src.setup.ioc.container import UseCaseProvider, create_container

__all__ = ["UseCaseProvider", "create_container"]
