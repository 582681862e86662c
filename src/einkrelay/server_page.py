"""Reader page served on the bootstrap path.

The page is self-contained: it embeds the initial markup and fingerprint so
the reader can paginate immediately, then polls the content endpoint and
re-paginates only when the fingerprint changes. Taps on the right half of
the screen turn forward, on the left half backward.
"""

from __future__ import annotations

import json

from einkrelay.protocol import CONTENT_PATH

# Milliseconds between polls issued by the reader page.
PAGE_POLL_INTERVAL_MS: int = 3000


def embed_json(value: str) -> str:
    """Encode a string as a JSON literal safe to place inside <script>."""
    return json.dumps(value).replace("</", "<\\/")


def render_page(markup: str, fingerprint: str) -> str:
    """Fill the reader page template.

    Args:
        markup: Initial rendered document.
        fingerprint: Fingerprint of the initial markup.

    Returns:
        The complete HTML page.
    """
    return (
        PAGE_TEMPLATE
        .replace("{{ poll_interval }}", str(PAGE_POLL_INTERVAL_MS))
        .replace("{{ content_path }}", CONTENT_PATH)
        .replace("{{ initial_hash }}", embed_json(fingerprint))
        .replace("{{ initial_content }}", embed_json(markup))
    )


PAGE_TEMPLATE: str = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>Reading</title>
    <meta name="viewport" content="width=device-width, initial-scale=1.0, user-scalable=no">
    <style>
        html, body { margin: 0; padding: 0; height: 100%; overflow: hidden; font-family: 'Georgia', serif; color: #111; background-color: #fdfdfd; }
        #book-viewport { height: calc(100% - 40px); overflow: hidden; }
        #ui-bar { height: 40px; position: fixed; bottom: 0; left: 0; width: 100%; background-color: rgba(255, 255, 255, 0.9); border-top: 1px solid #ddd; display: flex; justify-content: center; align-items: center; box-sizing: border-box; padding: 0 1em; user-select: none; font-family: sans-serif; color: #555; }
        #book-pages-container { display: flex; height: 100%; }
        .page { flex-shrink: 0; width: 100%; height: 100%; box-sizing: border-box; padding: 1em 1.5em; overflow: hidden; font-size: 1.3em; line-height: 1.6; }
        .page h1, .page h2, .page h3 { line-height: 1.2; }
        .page img { max-width: 100%; height: auto; }
        .page blockquote { border-left: 4px solid #ccc; padding-left: 1em; margin-left: 0; }
        .page table { border-collapse: collapse; }
        .page th, .page td { border: 1px solid #999; padding: 2px 6px; }
        .page pre, .page code { white-space: pre-wrap !important; word-break: break-all; font-size: 0.85em; background-color: #f3f3f3; border-radius: 4px; padding: 2px 4px; }
        .page pre { padding: 1em; }
    </style>
</head>
<body>
    <div id="book-viewport"><div id="book-pages-container"></div></div>
    <div id="ui-bar"><div id="page-counter"></div></div>
    <script>
        let currentPage = 0;
        let totalPages = 0;
        let currentHash = {{ initial_hash }};
        const viewport = document.getElementById('book-viewport');
        const pagesContainer = document.getElementById('book-pages-container');
        const pageCounter = document.getElementById('page-counter');
        function paginate(sourceHtml) {
            pagesContainer.innerHTML = '';
            const sourceDiv = document.createElement('div');
            sourceDiv.innerHTML = sourceHtml;
            const elements = Array.from(sourceDiv.children);
            if (elements.length === 0) {
                pagesContainer.innerHTML = '<div class="page"><p>No text.</p></div>';
                totalPages = 1; return;
            }
            const pageHeight = viewport.offsetHeight;
            let currentPageHTML = '';
            const pagesContent = [];
            const measurePage = document.createElement('div');
            measurePage.className = 'page';
            measurePage.style.visibility = 'hidden';
            measurePage.style.position = 'absolute';
            measurePage.style.height = 'auto';
            document.body.appendChild(measurePage);
            for (const el of elements) {
                const testHTML = currentPageHTML + el.outerHTML;
                measurePage.innerHTML = testHTML;
                if (measurePage.scrollHeight > pageHeight && currentPageHTML !== '') {
                    pagesContent.push(currentPageHTML);
                    currentPageHTML = el.outerHTML;
                } else { currentPageHTML = testHTML; }
            }
            if (currentPageHTML !== '') { pagesContent.push(currentPageHTML); }
            document.body.removeChild(measurePage);
            pagesContent.forEach(pageHtml => {
                const pageDiv = document.createElement('div');
                pageDiv.className = 'page';
                pageDiv.innerHTML = pageHtml;
                pagesContainer.appendChild(pageDiv);
            });
            totalPages = pagesContent.length;
        }
        function showPage(pageIndex) {
            if (pageIndex < 0 || pageIndex >= totalPages) return;
            currentPage = pageIndex;
            pagesContainer.style.transform = `translateX(-${currentPage * 100}%)`;
            pageCounter.textContent = totalPages > 0 ? `Page ${currentPage + 1} of ${totalPages}` : '';
        }
        function setupNavigation() {
            viewport.addEventListener('click', (event) => {
                if (event.target.closest('#ui-bar')) return;
                if (event.clientX > window.innerWidth / 2) { showPage(currentPage + 1); } else { showPage(currentPage - 1); }
            });
        }
        async function checkForUpdates() {
            try {
                const response = await fetch(`{{ content_path }}?_=${new Date().getTime()}`);
                // Error payloads carry a fresh fingerprint, so they are shown too
                const data = await response.json();
                if (data.hash !== currentHash) {
                    currentHash = data.hash;
                    paginate(data.html);
                    showPage(0);
                }
            } catch (error) { console.error('Update check failed:', error); }
        }
        document.addEventListener('DOMContentLoaded', () => {
            paginate({{ initial_content }});
            showPage(0);
            setupNavigation();
            setInterval(checkForUpdates, {{ poll_interval }});
            let resizeTimeout;
            window.addEventListener('resize', () => {
                clearTimeout(resizeTimeout);
                resizeTimeout = setTimeout(() => {
                    const allPageHtml = Array.from(document.querySelectorAll('.page')).map(p => p.innerHTML).join('');
                    paginate(allPageHtml);
                    showPage(Math.min(currentPage, totalPages - 1));
                }, 250);
            });
        });
    </script>
</body>
</html>
"""
