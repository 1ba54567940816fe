"""Names of the remote items the builders create and look up."""


class DataTypeNames:
    BLOCK_LIST_ICON_LIST = "[BlockList] Icon List"
    BLOCK_LIST_MAIN_CONTENT = "[BlockList] Main Content"
    CONTENT_PICKER_AUTHORS = "[MNTP] Authors"
    CONTENT_PICKER_CATEGORIES = "[MNTP] Categories"
    DOCUMENT_PICKER = "Content Picker"
    DATE_PICKER_WITH_TIME = "Date Picker with time"
    DROPDOWN_SPACING = "[Dropdown] Spacing"
    LIST_VIEW_CONTENT = "List View - Content"
    MEDIA_PICKER_IMAGE = "Image Media Picker"
    MEDIA_PICKER_MULTIPLE_IMAGE = "Multiple Image Media Picker"
    MEDIA_PICKER_SVG = "[MediaPicker] SVG Image"
    NUMERIC = "Numeric"
    RICH_TEXT_EDITOR = "Richtext editor"
    SLIDER_SPACING = "[Slider] Spacing"
    TAGS = "Tags"
    TEXT_AREA = "Textarea"
    TEXT_STRING = "Textstring"
    TOGGLE = "True/false"
    TOGGLE_DEFAULT_TRUE = "[Toggle] Default True"
    URL_PICKER_SINGLE = "[MultiUrlPicker] Single Url Picker"


class MediaTypeNames:
    FOLDER = "Folder"
    IMAGE = "Image"
    VECTOR_GRAPHICS = "Vector Graphics (SVG)"


class DocumentTypeNames:
    HOME = "Home"
    ARTICLE_LIST = "Article List"
    ARTICLE = "Article"
    CONTACT = "Contact"
    ERROR = "Error"
    XML_SITEMAP = "XML Sitemap"
    SEARCH = "Search"
    AUTHOR_LIST = "Author List"
    AUTHOR = "Author"
    CATEGORY_LIST = "Category List"
    CATEGORY = "Category"
    CONTENT = "Content"


class Compositions:
    ARTICLE_CONTROLS = "Article Controls"
    CONTENT_CONTROLS = "Content Controls"
    HEADER_CONTROLS = "Header Controls"
    FOOTER_CONTROLS = "Footer Controls"
    MAIN_IMAGE_CONTROLS = "Main Image Controls"
    SEO_CONTROLS = "SEO Controls"
    VISIBILITY_CONTROLS = "Visibility Controls"
    CONTACT_FORM_CONTROLS = "Contact Form Controls"
    HIDE_PROPERTY = "Hide Property"
    SPACING_PROPERTIES = "Spacing Properties"


class ContentElements:
    RICH_TEXT_ROW = "Rich Text Row"
    IMAGE_ROW = "Image Row"
    VIDEO_ROW = "Video Row"
    CODE_SNIPPET_ROW = "Code Snippet Row"
    IMAGE_CAROUSEL_ROW = "Image Carousel Row"
    LATEST_ARTICLES_ROW = "Latest Articles Row"
    ICON_LINK_ROW = "Icon Link Row"


def settings_element(content_element: str) -> str:
    """Name of the settings element type paired with a content element type."""
    return f"{content_element} Settings"


class SettingsElements:
    RICH_TEXT_ROW = settings_element(ContentElements.RICH_TEXT_ROW)
    IMAGE_ROW = settings_element(ContentElements.IMAGE_ROW)
    VIDEO_ROW = settings_element(ContentElements.VIDEO_ROW)
    CODE_SNIPPET_ROW = settings_element(ContentElements.CODE_SNIPPET_ROW)
    IMAGE_CAROUSEL_ROW = settings_element(ContentElements.IMAGE_CAROUSEL_ROW)
    LATEST_ARTICLES_ROW = settings_element(ContentElements.LATEST_ARTICLES_ROW)
    ICON_LINK_ROW = settings_element(ContentElements.ICON_LINK_ROW)


class TemplateNames:
    MASTER = "Master"
    ARTICLE = "Article"
    ARTICLE_LIST = "Article List"
    AUTHOR = "Author"
    AUTHOR_LIST = "Author List"
    CONTACT = "Contact"
    CONTENT = "Content"
    ERROR = "Error"
    HOME = "Home"
    SEARCH = "Search"
    XML_SITEMAP = "XMLSitemap"


# Document type folder paths
COMPOSITIONS_FOLDER = ("Compositions",)
SETTINGS_COMPOSITIONS_FOLDER = ("Compositions", "Content Blocks", "Setting Models")
CONTENT_ELEMENTS_FOLDER = ("Elements", "Content Models")
SETTINGS_ELEMENTS_FOLDER = ("Elements", "Setting Models")
PAGES_FOLDER = ("Pages",)

# Root media folders
SOCIAL_ICONS_FOLDER = "Social Icons"
SAMPLE_IMAGES_FOLDER = "Sample Images"
AUTHORS_FOLDER = "Authors"
