"""
Исполнители команд mtx: реальное устройство и имитатор
"""
