import shutil
import subprocess
import logging
from typing import Dict

logger = logging.getLogger(__name__)


class DependencyChecker:
    """Проверка системных зависимостей"""

    OPTIONAL_DEPENDENCIES = [
        'lsscsi', 'tapeinfo'
    ]

    PYTHON_MODULES = [
        'yaml',
        'jsonschema'
    ]

    @staticmethod
    def check_all(mtx_path: str = 'mtx') -> bool:
        """Проверить все зависимости"""
        print("\n🔍 Проверка системных зависимостей:")
        print("-" * 40)

        results = DependencyChecker.collect(mtx_path)
        all_ok = True

        print("📦 Обязательные утилиты:")
        for tool in [mtx_path]:
            if results[tool]:
                print(f"  ✅ {tool}")
            else:
                print(f"  ❌ {tool} - ОБЯЗАТЕЛЬНАЯ УТИЛИТА ОТСУТСТВУЕТ")
                all_ok = False

        print("\n📦 Опциональные утилиты:")
        for tool in DependencyChecker.OPTIONAL_DEPENDENCIES:
            if results[tool]:
                print(f"  ✅ {tool}")
            else:
                print(f"  ⚠️  {tool} - опциональная утилита отсутствует")

        print("\n🐍 Python модули:")
        for module in DependencyChecker.PYTHON_MODULES:
            if results[module]:
                print(f"  ✅ {module}")
            else:
                print(f"  ❌ {module} - ТРЕБУЕТСЯ УСТАНОВКА")
                all_ok = False

        print("\n" + "=" * 40)

        if all_ok:
            print("✅ Все обязательные зависимости удовлетворены")
        else:
            print("❌ Отсутствуют обязательные зависимости")
            print("\n💡 Рекомендации:")
            print("  Ubuntu/Debian: sudo apt-get install mtx")
            print("  CentOS/RHEL: sudo yum install mtx")
            print("  Python: pip install PyYAML jsonschema")

        return all_ok

    @staticmethod
    def collect(mtx_path: str = 'mtx') -> Dict[str, bool]:
        """Наличие каждой утилиты и модуля"""
        results = {}

        for tool in [mtx_path] + DependencyChecker.OPTIONAL_DEPENDENCIES:
            results[tool] = DependencyChecker._check_tool(tool)

        for module in DependencyChecker.PYTHON_MODULES:
            try:
                __import__(module)
                results[module] = True
            except ImportError:
                results[module] = False

        logger.debug(f"Результаты проверки зависимостей: {results}")
        return results

    @staticmethod
    def _check_tool(tool_name: str) -> bool:
        """Проверить наличие инструмента в системе"""
        return shutil.which(tool_name) is not None

    @staticmethod
    def get_tool_version(tool_name: str) -> str:
        """Получить версию инструмента"""
        try:
            result = subprocess.run(
                [tool_name, '--version'],
                capture_output=True,
                text=True,
                timeout=5
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            return f"Ошибка: {e}"

        if result.returncode == 0 and result.stdout:
            return result.stdout.split('\n')[0].strip()
        return "Не удалось определить версию"
