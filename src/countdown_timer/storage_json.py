import os
import json
import logging

from .storage_interface import StorageInterface

log = logging.getLogger(__name__)

class StorageJSON(StorageInterface):
    '''
    A flat JSON object of string values.  
    The whole file is rewritten on every mutation; it only ever holds a 
    couple of short entries.  
    '''

    def __init__(self, /, path: str) -> None:
        self.path = path
        self.__data: dict[str, str] | None = None
    
    def __load(self) -> dict[str, str]:
        if self.__data is None:
            try:
                with open(self.path, 'r', encoding='utf-8') as f:
                    raw: dict = json.load(f)
            except FileNotFoundError:
                raw = {}
            assert isinstance(raw, dict), self.path
            self.__data = {str(k): str(v) for k, v in raw.items()}
        return self.__data
    
    def __dump(self) -> None:
        data = self.__load()
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
        log.debug('wrote %d key(s) to %s', len(data), self.path)
    
    def get(self, key: str) -> str | None:
        return self.__load().get(key)
    
    def set(self, key: str, value: str) -> None:
        self.__load()[key] = value
        self.__dump()
    
    def remove(self, key: str) -> None:
        data = self.__load()
        if key not in data:
            return
        del data[key]
        self.__dump()
