from abc import ABC, abstractmethod

class FileUploader(ABC):
    """Abstract file uploader interface"""
    @abstractmethod
    def upload(self, local_path: str, object_key: str, content_type: str) -> bool:
        pass

    @abstractmethod
    def public_url(self, object_key: str) -> str:
        pass
