from fastapi import Depends

from adapter.external.free_dictionary import FreeDictionaryAdapter
from port.dictionary import DictionaryPort
from services.dictionary_service import DictionaryService


def get_dictionary_port() -> DictionaryPort:
    return FreeDictionaryAdapter()


def get_dictionary_service(
    dictionary: DictionaryPort = Depends(get_dictionary_port),
) -> DictionaryService:
    return DictionaryService(dictionary)
