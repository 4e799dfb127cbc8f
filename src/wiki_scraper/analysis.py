import logging

from wiki_scraper.capabilities.page_source import IPageFetcher, IPageExtractor
from wiki_scraper.models import AnalysisResult, AnalysisStatus
from wiki_scraper.text.word_count import count_words
from wiki_scraper.utils.wiki_helpers import get_page_identifier

logger = logging.getLogger(__name__)


def analyze_page(page_title: str, fetcher: IPageFetcher, extractor: IPageExtractor) -> AnalysisResult:
    """
    Count the words in the body paragraphs of a page.

    Footnote markers are removed before the text is collected so that
    ``[1]``-style references do not end up glued to words.

    Raises:
        WikiServiceUnavailableException: If the fetch fails at the transport level.
    """
    title = get_page_identifier(page_title)
    logger.info(f"Fetching: {title}...")
    page = fetcher.fetch_page(title)
    if not page.exists:
        logger.warning(f"Page '{title}' does not exist")
        return AnalysisResult(title=title, status=AnalysisStatus.PAGE_NOT_FOUND)

    document = extractor.parse(page.html)
    extractor.strip_footnote_markers(document)
    paragraphs = extractor.paragraph_text(document)
    statistics = count_words("\n".join(paragraphs))

    logger.info(f"Analysed {len(paragraphs)} paragraphs of '{title}': {statistics.total_words} words")
    return AnalysisResult(
        title=title,
        status=AnalysisStatus.COMPLETED,
        statistics=statistics,
        paragraph_count=len(paragraphs),
    )
