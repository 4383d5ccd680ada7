from abc import ABC, abstractmethod

class StorageInterface(ABC):
    @abstractmethod
    def get(self, key: str) -> str | None:
        raise NotImplementedError
    
    @abstractmethod
    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
    
    @abstractmethod
    def remove(self, key: str) -> None:
        '''
        Removing a missing key is a no-op.  
        '''
        raise NotImplementedError
