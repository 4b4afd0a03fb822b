"""
Checklist catalogue - every check the audit wizard asks about.

Checks are ordered by importance within each category (critical -> high ->
medium -> low). Ids are unique across the whole catalogue.
"""
from seo_checklist.services.registry.models import Check, Importance


AUTHORITY_CHECKS = (
    Check(
        id="dr-growth",
        name="Domain Rating Growth",
        description="Does the site have a clear increase in domain rating over the last 2 years?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="natural-link-profile",
        name="Natural Link Profile",
        description="Does the site have a natural link profile attributed to it?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="anchor-text-distribution",
        name="Anchor Text Distribution",
        description="Is the anchor text profile of the website natural and NOT exact-match heavy?",
        importance=Importance.HIGH,
    ),
    Check(
        id="high-authority-backlinks",
        name="High-Authority Backlinks",
        description="Does the site have backlinks from at least 10 high-authority domains (DR 50+) in the past 12 months?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="referring-domains-growth",
        name="Referring Domains Growth",
        description="Does the site have a clear, consistent increase in referring domains over the last 12 months?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="spam-score",
        name="Low Spam Score",
        description="Does the site have a spam score of 1% or less?",
        importance=Importance.MEDIUM,
    ),
)

ON_PAGE_CHECKS = (
    Check(
        id="meta-titles",
        name="Optimised Meta Titles",
        description="Do all key pages have optimised meta titles?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="h1-tags",
        name="Single H1 Tag",
        description="Do all pages have x1 H1 tag?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="missing-h1-tag",
        name="Missing H1 Tag",
        description="Are any pages missing a H1 tag?",
        importance=Importance.HIGH,
    ),
    Check(
        id="url-structure",
        name="URL Structure",
        description="Is the website's URL structure clear, concise and logical?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="image-alt-text",
        name="Image Alt Text",
        description="Do images have optimised alt text attributed to them on a consistent basis across the site?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="meta-descriptions",
        name="Optimised Meta Descriptions",
        description="Do all key pages have optimised meta descriptions?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="internal-linking",
        name="Internal Linking",
        description="Are internal links optimised with varying anchor texts to key pages?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="image-file-names",
        name="Image File Names",
        description="Do images have optimised file names attributed to them on a consistent basis across the site?",
        importance=Importance.LOW,
    ),
    Check(
        id="pagination-check",
        name="Pagination Check",
        description="If pagination exists, is it working correctly?",
        importance=Importance.LOW,
    ),
)

TECHNICAL_CHECKS = (
    Check(
        id="robots-txt",
        name="Robots.txt Valid",
        description="Check if robots.txt exists and is valid.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="robots-txt-blocking",
        name="Robots.txt blocking URLs",
        description="Check to see if any key URLs are blocked from indexing via robots.txt",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="sitemap-exists",
        name="Sitemap.xml Exists",
        description="Does sitemap.xml file exist?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="internal-404s",
        name="Internal 404 Errors",
        description="Are there internal 404 errors firing on the website?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="missing-meta-titles",
        name="Missing Meta Titles",
        description="Any missing meta titles?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="noindex-key-pages",
        name="Noindex on Key Pages",
        description="Any key pages have a noindex tag attributed on them?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="js-dependency",
        name="JavaScript Dependency",
        description="Does critical content load without dependency of JavaScript (e.g. navigation/key HTML)?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="sitemap-errors",
        name="Sitemap URL Errors",
        description="Do URLs in sitemap.xml file return any 404 or 3xx errors?",
        importance=Importance.HIGH,
    ),
    Check(
        id="soft-404s",
        name="Soft 404 Errors",
        description="Are there any soft 404 errors firing on the website?",
        importance=Importance.HIGH,
    ),
    Check(
        id="duplicate-meta-titles",
        name="Duplicate Meta Titles",
        description="Any duplicate meta titles?",
        importance=Importance.HIGH,
    ),
    Check(
        id="internal-redirects",
        name="Internal Redirects",
        description="Are there internal redirects firing on the website?",
        importance=Importance.HIGH,
    ),
    Check(
        id="crawl-depth",
        name="Crawl Depth",
        description="Are any key pages >3 clicks from the homepage?",
        importance=Importance.HIGH,
    ),
    Check(
        id="mixed-content",
        name="Mixed Content Check",
        description="Ensure that there are no mixed content errors occurring",
        importance=Importance.HIGH,
    ),
    Check(
        id="ai-crawlers-blocked",
        name="AI Crawlers Access",
        description="Ensure AI crawlers are not blocked in the robots.txt",
        importance=Importance.HIGH,
    ),
    Check(
        id="sitemap-structure",
        name="Sitemap.xml Structure",
        description="Is the sitemap.xml file structured clean and correct with categories?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="5xx-errors",
        name="5xx Errors",
        description="Are there any 5xx errors firing on the website?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="duplicate-meta-descriptions",
        name="Duplicate Meta Descriptions",
        description="Any duplicate meta descriptions?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="missing-meta-descriptions",
        name="Missing Meta Descriptions",
        description="Any missing meta descriptions?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="redirect-chains",
        name="Redirect Chains",
        description="Are there any redirect chains or loops firing on the website?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="missing-hsts-header",
        name="Missing HSTS Header",
        description="Ensure there is no missing HSTS header",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="self-referencing-canonicals",
        name="Self-Referencing Canonicals",
        description="Do the main URLs have self-referencing canonical tags that we want to rank?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="canonical-conflicts",
        name="Canonical Conflicts",
        description="Do any URLs canonicalise to a 404/non-indexable URL?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="orphan-pages",
        name="Orphan Pages",
        description="Any orphan pages on the website?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="organisation-schema",
        name="Organisation Schema",
        description="Does the website have organisation schema marked up correctly?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="placeholder-text",
        name="Placeholder Text",
        description="Is there any lorem ipsum placeholder text on the site?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="sitemap-in-robots",
        name="Sitemap.xml In Robots.txt",
        description="Is the sitemap.xml referenced in the robots.txt file?",
        importance=Importance.LOW,
    ),
    Check(
        id="https-consistency",
        name="HTTPS Consistency",
        description="Check the site is being linked/deployed using HTTPS consistently",
        importance=Importance.LOW,
    ),
    Check(
        id="www-consistency",
        name="WWW vs Non-WWW",
        description="Check the site is being linked/deployed using WWW/Non-WWW consistency and not both",
        importance=Importance.LOW,
    ),
)

EEAT_CHECKS = (
    Check(
        id="about-page-exists",
        name="About Page Exists",
        description="Is there an about page that exists on the site?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="about-page-details",
        name="About Page Details",
        description="Does the about page include details such as team members, company overview/history and company values?",
        importance=Importance.HIGH,
    ),
    Check(
        id="author-bios",
        name="Author Bios in Content",
        description="Are there author bios included in the blog content pages with clickable links to the author landing pages?",
        importance=Importance.HIGH,
    ),
    Check(
        id="date-published-updated",
        name="Date Published/Updated",
        description="Is there a date published/updated section on the blog content?",
        importance=Importance.HIGH,
    ),
    Check(
        id="reviews-page",
        name="Reviews Page",
        description="Is there a reviews page on the site?",
        importance=Importance.HIGH,
    ),
    Check(
        id="reviews-banner",
        name="Reviews Banner",
        description="Is there a reviews banner on the homepage/across the site?",
        importance=Importance.HIGH,
    ),
    Check(
        id="privacy-policy",
        name="Privacy Policy Page",
        description="Is there a privacy policy page on the site?",
        importance=Importance.HIGH,
    ),
    Check(
        id="optimised-404-page",
        name="Optimised 404 Page",
        description="Is the 404 page optimised for users to navigate back to key pages on the site?",
        importance=Importance.HIGH,
    ),
    Check(
        id="author-profile-pages",
        name="Author Profile Pages",
        description="Does the site have author profile landing pages with clear details about the author's expertise, including aspects such as an overview, links to social profiles and any blogs that author has written on the site?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="person-schema",
        name="Person Schema",
        description="Is person schema added to the author pages with correct information?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="reviews-rating",
        name="Reviews Rating",
        description="If reviews are integrated on the site, do they have over 4.5 star rating?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="terms-conditions",
        name="Terms & Conditions Page",
        description="Is there a T&Cs page on the site?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="social-media-links",
        name="Social Media Links",
        description="Does the website have links to their social media profiles in the footer of the site?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="favicon",
        name="Favicon",
        description="Is the favicon added to the site correctly and pulling through to the search results?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="contact-us-page",
        name="Contact Us Page",
        description="Is there a contact page with all of the key contact information displayed?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="copyright-date",
        name="Copyright Date",
        description="Is the copyright data in the footer and updated to this year?",
        importance=Importance.LOW,
    ),
)

SOCIAL_SEARCH_CHECKS = (
    Check(
        id="tiktok-active",
        name="TikTok Presence",
        description="Is the brand active across TikTok?",
        importance=Importance.HIGH,
    ),
    Check(
        id="youtube-active",
        name="YouTube Presence",
        description="Is the brand active across YouTube?",
        importance=Importance.HIGH,
    ),
    Check(
        id="instagram-active",
        name="Instagram Presence",
        description="Is the brand active across Instagram?",
        importance=Importance.HIGH,
    ),
    Check(
        id="social-engagement",
        name="Social Engagement Management",
        description="Are social comments and reviews being responded to and managed consistently?",
        importance=Importance.HIGH,
    ),
    Check(
        id="open-graph-tags",
        name="Open Graph Tags",
        description="Are open graphs tags implemented and optimised correctly?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="pinterest-active",
        name="Pinterest Presence",
        description="Is the brand active across Pinterest?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="consistent-handles",
        name="Consistent Handles",
        description="Are brand handles and usernames consistent across all social search platforms?",
        importance=Importance.MEDIUM,
    ),
)

AI_SEARCH_CHECKS = (
    Check(
        id="clear-direct-answers",
        name="Clear, Direct Answers",
        description="Does content provide concise, direct answers to common questions (not buried in fluff)?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="content-freshness",
        name="Content Freshness",
        description="Is content regularly updated with visible last updated dates?",
        importance=Importance.HIGH,
    ),
    Check(
        id="faq-sections",
        name="FAQ Sections",
        description="Are FAQ sections with Q&A format present on key pages?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="structured-data-coverage",
        name="Structured Data Coverage",
        description="Is comprehensive schema markup used (FAQ, HowTo, Article, Product, etc.)?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="comprehensive-topic-coverage",
        name="Comprehensive Topic Coverage",
        description="Does content thoroughly cover topics rather than shallow overviews?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="original-research",
        name="Original Research/Statistics",
        description="Does the site publish original data, studies or unique insights that AI would cite?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="citation-ready-formatting",
        name="Citation-Ready Formatting",
        description="Are key facts, definitions and stats formatted in easily extractable ways?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="entity-recognition",
        name="Entity Recognition",
        description="Is the brand/site recognised as an entity (appears in knowledge panels, Wikipedia etc)?",
        importance=Importance.MEDIUM,
    ),
)

PERFORMANCE_CHECKS = (
    Check(
        id="lcp",
        name="LCP (Largest Contentful Paint)",
        description="Is LCP under 2.5 seconds?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="inp",
        name="INP (Interaction to Next Paint)",
        description="Is INP under 200ms?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="cls",
        name="CLS (Cumulative Layout Shift)",
        description="Is CLS under 0.1?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="uncompressed-html",
        name="Uncompressed HTML",
        description="Is uncompressed HTML size under 2mb?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="mobile-page-speed",
        name="Mobile Page Speed Score",
        description="Does the site score 75+ on mobile in PageSpeed Insights?",
        importance=Importance.HIGH,
    ),
    Check(
        id="desktop-page-speed",
        name="Desktop Page Speed Score",
        description="Does the site score 75+ on desktop in PageSpeed Insights?",
        importance=Importance.HIGH,
    ),
    Check(
        id="mobile-responsiveness",
        name="Mobile Responsiveness",
        description="Is the site fully responsive and mobile-friendly?",
        importance=Importance.HIGH,
    ),
    Check(
        id="ttfb",
        name="TTFB (Time to First Byte)",
        description="Is server response time under 800ms?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="image-optimisation",
        name="Image Optimisation",
        description="Are images compressed and using modern formats (WebP/AVIF)?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="render-blocking-resources",
        name="Render-Blocking Resources",
        description="Are critical CSS/JS files optimised to not block rendering?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="gzip-compression",
        name="Gzip Compresson",
        description="Does the site operate with gzip compression?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="carbon-footprint",
        name="Carbon Footprint",
        description="The website does not have a carbon rating of 'F' using the carbon footprint calculator",
        importance=Importance.MEDIUM,
    ),
)

ECOMMERCE_COLLECTION_CHECKS = (
    Check(
        id="collection-product-carousels",
        name="Product Carousels",
        description="Do collection pages have product carousels that link to individual product pages?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="collection-filter-canonicals",
        name="Filter Canonicalisation",
        description="Is there a filter system that works and canonicalises correctly to the collection URL?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="collection-h1-optimised",
        name="Optimised Collection H1s",
        description="There are clear, optimised H1s on key collection pages for focus keyword intents.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="collection-navigation-access",
        name="Navigation Accessibility",
        description="Key collection pages are accessible from navigation/homepage.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="collection-cls",
        name="Collection Page CLS",
        description="Collection pages have no CLS occurring.",
        importance=Importance.HIGH,
    ),
    Check(
        id="collection-url-structure",
        name="Collection URL Structure",
        description="There is a clear URL structure in place for collection pages for the CMS it operates on.",
        importance=Importance.HIGH,
    ),
    Check(
        id="collection-product-ctas",
        name="Product CTAs",
        description="There is a clear CTA for each product in the product carousel.",
        importance=Importance.HIGH,
    ),
    Check(
        id="collection-h1-description",
        name="H1 Description",
        description="Do collection pages have a brief description underneath the H1?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="collection-carousel-alt-text",
        name="Carousel Image Alt Text",
        description="Has alt text been added to product images in the product carousel?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="collection-breadcrumbs",
        name="Collection Breadcrumbs",
        description="Breadcrumbs are added to collection pages and structurally correct.",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="collection-faqs",
        name="Collection Page FAQs",
        description="Do collection pages have FAQs added to the bottom with FAQ schema added?",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="collection-reviews-banner",
        name="Reviews Banner/Carousel",
        description="There is a reviews banner/carousel integrated on collection pages.",
        importance=Importance.MEDIUM,
    ),
)

ECOMMERCE_PRODUCT_CHECKS = (
    Check(
        id="product-pricing",
        name="Clear Pricing",
        description="Product pages have clear pricing for users to see.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="product-schema",
        name="Product Schema",
        description="Product schema is added to product pages and validated.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="product-stock-availability",
        name="Stock Availability",
        description="Product pages show stock availability.",
        importance=Importance.HIGH,
    ),
    Check(
        id="product-review-rating",
        name="Review Star Rating",
        description="Product review star rating is visible.",
        importance=Importance.HIGH,
    ),
    Check(
        id="product-specs-features",
        name="Specs & Features",
        description="Product pages have clear specs and features visible and accessible.",
        importance=Importance.HIGH,
    ),
    Check(
        id="product-return-policy",
        name="Return & Refund Policy",
        description="Product pages have clear return and refund policies information.",
        importance=Importance.HIGH,
    ),
    Check(
        id="product-shipping",
        name="Shipping Information",
        description="Product pages have clear shipping information.",
        importance=Importance.HIGH,
    ),
    Check(
        id="product-merchant-center",
        name="Google Merchant Center Data",
        description="Product has the correct Google Merchant Center data.",
        importance=Importance.HIGH,
    ),
    Check(
        id="product-cls",
        name="Product Page CLS",
        description="Product pages have no CLS occurring.",
        importance=Importance.HIGH,
    ),
    Check(
        id="product-image-quality",
        name="Product Image Quality",
        description="Product images are high quality.",
        importance=Importance.HIGH,
    ),
    Check(
        id="product-image-alt-text",
        name="Product Image Alt Text",
        description="Product images have optimised alt text.",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="product-warranty",
        name="Warranty Information",
        description="Product pages have clear warranty information on the page.",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="product-contact-info",
        name="Customer Support Info",
        description="Product pages have clear customer support/contact information displayed.",
        importance=Importance.MEDIUM,
    ),
)

LOCAL_GBP_CHECKS = (
    Check(
        id="gbp-verified",
        name="GBP Verified & Claimed",
        description="A verified GBP exists and has been claimed.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="gbp-business-name",
        name="Business Name Correct",
        description="The business name is correct and specific to the location.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="gbp-address",
        name="Business Address Correct",
        description="The business address is correct and specific to the location.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="gbp-phone",
        name="Phone Number Correct",
        description="The business phone number is correct and specific to the location.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="gbp-website",
        name="Website Link Correct",
        description="The business website is correct and points to the correct landing page.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="gbp-primary-category",
        name="Primary Category Correct",
        description="The primary business category is correct.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="gbp-reviews-answered",
        name="Reviews Answered",
        description="Reviews are being answered consistently.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="gbp-working-hours",
        name="Working Hours Correct",
        description="The business working hours are correct and match the landing page.",
        importance=Importance.HIGH,
    ),
    Check(
        id="gbp-secondary-categories",
        name="Secondary Categories",
        description="Secondary business categories are present and accurate.",
        importance=Importance.HIGH,
    ),
    Check(
        id="gbp-description",
        name="Complete Description",
        description="The profile has a complete description.",
        importance=Importance.HIGH,
    ),
    Check(
        id="gbp-logo",
        name="Logo Uploaded",
        description="The logo is uploaded and accurate.",
        importance=Importance.HIGH,
    ),
    Check(
        id="gbp-cover-image",
        name="Cover Image",
        description="The cover image is a wide exterior photo showcasing the location.",
        importance=Importance.HIGH,
    ),
    Check(
        id="gbp-interior-exterior-photos",
        name="Interior & Exterior Photos",
        description="The profile has interior and exterior photos added.",
        importance=Importance.HIGH,
    ),
    Check(
        id="gbp-services",
        name="Services with Descriptions",
        description="The profile includes services with descriptions (if applicable).",
        importance=Importance.HIGH,
    ),
    Check(
        id="gbp-review-flow",
        name="Consistent Review Flow",
        description="The business has a consistent flow of high-quality reviews.",
        importance=Importance.HIGH,
    ),
    Check(
        id="gbp-holiday-hours",
        name="Holiday Hours Added",
        description="The business holiday hours have correctly been added.",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="gbp-social-links",
        name="Social Profile Links",
        description="The profile contains links to all relevant social profiles.",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="gbp-service-area",
        name="Service Area Included",
        description="The business service area is included (where applicable).",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="gbp-team-photo",
        name="Team Photo",
        description="The profile has a team photo.",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="gbp-questions-answered",
        name="Questions Answered",
        description="All questions on the profile have been answered (if applicable).",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="gbp-video",
        name="Video Asset",
        description="The profile has a video asset.",
        importance=Importance.LOW,
    ),
)

LOCAL_LANDING_CHECKS = (
    Check(
        id="local-h1-optimised",
        name="Local H1 Optimised",
        description="Is the H1 optimised for the local search intent it should be targeting?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="local-metadata-optimised",
        name="Local Metadata Optimised",
        description="Is the metadata optimised for the local search intent it should be targeting?",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="local-nap-details",
        name="NAP & Opening Hours",
        description="The landing page includes the address, opening hours and contact details for users to see.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="local-business-schema",
        name="LocalBusiness Schema",
        description="LocalBusiness schema is added to the landing page.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="local-store-image",
        name="Store Image",
        description="The landing page includes a high-quality image of the store.",
        importance=Importance.HIGH,
    ),
    Check(
        id="local-gbp-reviews",
        name="GBP Reviews Integrated",
        description="Google Business Profile reviews are integrated onto the page.",
        importance=Importance.HIGH,
    ),
    Check(
        id="local-google-maps",
        name="Google Maps Integration",
        description="Google Maps is integrated onto the landing page.",
        importance=Importance.HIGH,
    ),
    Check(
        id="local-ctas",
        name="Clear CTAs",
        description="Clear CTAs are added for booking appointments/getting directions.",
        importance=Importance.HIGH,
    ),
    Check(
        id="local-image-alt-text",
        name="Image Alt Text",
        description="The images on the landing page have optimised alt text added.",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="local-faqs",
        name="Store FAQs",
        description="There are FAQs about the store added with FAQ schema attributed.",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="local-facilities",
        name="Store Facilities",
        description="The facilities of the store are included.",
        importance=Importance.MEDIUM,
    ),
    Check(
        id="local-team-section",
        name="Team Section",
        description="There is a section of the team who runs the store for trust.",
        importance=Importance.MEDIUM,
    ),
)

INTERNATIONAL_CHECKS = (
    Check(
        id="intl-hreflang-implementation",
        name="Hreflang Implementation",
        description="Hreflang has correctly been implemented across the domain.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="intl-unique-content",
        name="Unique Content per Region",
        description="All of the content is not duplicated/the same across each separate location area of the site.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="intl-no-geo-redirects",
        name="No Geolocation Redirects",
        description="There are no geolocation redirects automatically triggering/set up on the site.",
        importance=Importance.CRITICAL,
    ),
    Check(
        id="intl-metadata-differentiation",
        name="Metadata Differentiation",
        description="There is a clear difference in metadata for each country.",
        importance=Importance.HIGH,
    ),
    Check(
        id="intl-hreflang-sitemap",
        name="Hreflang XML Sitemap",
        description="A clear hreflang XML sitemap exists.",
        importance=Importance.HIGH,
    ),
    Check(
        id="intl-subdirectory-structure",
        name="Subdirectory Structure",
        description="The logic of the site does not use subdomains to separate the different country versions (uses subdirectories).",
        importance=Importance.HIGH,
    ),
    Check(
        id="intl-language-selector",
        name="Language Selector",
        description="Users can choose their language clearly on the site from an option/selection widget/CTA.",
        importance=Importance.HIGH,
    ),
    Check(
        id="intl-crawlability",
        name="Cross-version Crawlability",
        description="Crawling and navigating between the different versions of the site is a simple and clear process.",
        importance=Importance.HIGH,
    ),
)
