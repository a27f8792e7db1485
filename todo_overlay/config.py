import cv2
from pydantic import BaseModel, ConfigDict, Field

Rgba = tuple[int, int, int, int]


class OverlayConfig(BaseModel):
    """Пользовательские настройки оверлея списка дел"""
    # Настройки меняются на лету из UI, поэтому проверяем и присваивания
    model_config = ConfigDict(validate_assignment=True)

    enabled: bool = Field(True, description="Показывать оверлей")
    hotkey: str | None = Field(None, description="Горячая клавиша переключения оверлея")
    hide_at_festivals: bool = Field(False, description="Скрывать оверлей во время фестивалей")

    # Ограничения панели
    max_width: int = Field(600, ge=0, description="Максимальная ширина панели (px)")
    max_items: int = Field(10, ge=0, description="Максимальное число отображаемых пунктов")

    # Цвета (RGBA, альфа 0..255)
    background_color: Rgba = Field((0, 0, 0, 51), description="Цвет фона панели")
    text_color: Rgba = Field((255, 255, 255, 204), description="Цвет текста")

    # Положение
    offset_x: int = Field(0, description="Смещение панели по горизонтали (px)")
    offset_y: int = Field(0, description="Смещение панели по вертикали (px)")


class LayoutConfig(BaseModel):
    """Константы раскладки панели"""
    margin_top: int = Field(5, ge=0, description="Верхний отступ")
    margin_left: int = Field(5, ge=0, description="Левый отступ")
    margin_right: int = Field(5, ge=0, description="Правый отступ")
    margin_bottom: int = Field(5, ge=0, description="Нижний отступ")
    line_spacing: int = Field(5, ge=0, description="Интервал между строками")

    # Сдвиг вниз на уровнях шахты, чтобы не перекрывать индикатор глубины
    depth_offset: int = Field(80, ge=0, description="Сдвиг панели на подземных уровнях")
    separator_inset: int = Field(3, ge=0, description="Насколько линия под заголовком короче заголовка")

    item_indent: str = Field("  ", description="Отступ для обычных пунктов")
    overflow_marker: str = Field("…", description="Строка вместо пунктов сверх лимита")
    header_text: str = Field("To-Do List", description="Заголовок панели")


class FontConfig(BaseModel):
    """Настройки шрифта OpenCV"""
    face: int = Field(cv2.FONT_HERSHEY_SIMPLEX, ge=0, description="Шрифт Hershey")
    scale: float = Field(0.5, gt=0.0, le=4.0, description="Масштаб шрифта")
    thickness: int = Field(1, ge=1, le=8, description="Толщина штриха")
    bold_offset: int = Field(1, ge=0, le=4, description="Сдвиг второго прохода для жирного текста (px)")


class PreviewConfig(BaseModel):
    """Настройки демонстрационного кадра"""
    width: int = Field(1280, ge=320, le=3840, description="Ширина кадра")
    height: int = Field(720, ge=240, le=2160, description="Высота кадра")
    output_path: str = Field("overlay_preview.png", description="Куда сохранять превью")


class Config(BaseModel):
    """Главная конфигурация приложения"""
    overlay: OverlayConfig = OverlayConfig()
    layout: LayoutConfig = LayoutConfig()
    font: FontConfig = FontConfig()
    preview: PreviewConfig = PreviewConfig()


# Глобальный экземпляр конфигурации
config = Config()
