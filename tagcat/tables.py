"""
Element tables.

Generated by `python -m tagcat` from the MDN element reference; do not edit.

Documentation source: "SVG element reference" and "HTML element reference"
by Mozilla Contributors, https://developer.mozilla.org/, licensed under
CC-BY-SA 2.5.
"""

# (tag, description) in documentation order.

SVG_ELEMENTS = (
    ("a", "The <a> SVG element defines a hyperlink."),
    ("altGlyph", "The <altGlyph> SVG element allows sophisticated selection of the glyphs used to render its child character data."),
    ("altGlyphDef", "The <altGlyphDef> SVG element defines a substitution representation for glyphs."),
    ("altGlyphItem", "The <altGlyphItem> element provides a set of candidates for glyph substitution by the <altGlyph> element."),
    ("animate", "The animate element is put inside a shape element and defines how an attribute of an element changes over the animation."),
    ("animateColor", "The <animateColor> SVG element specifies a color transformation over time."),
    ("animateMotion", "The <animateMotion> element causes a referenced element to move along a motion path."),
    ("animateTransform", "The animateTransform element animates a transformation attribute on a target element, thereby allowing animations to control translation, scaling, rotation and/or skewing."),
    ("circle", "The <circle> SVG element is an SVG basic shape, used to create circles based on a center point and a radius."),
    ("clipPath", "The <clipPath> SVG element defines a clipping path."),
    ("color-profile", "The <color-profile> element allows describing the color profile used for the image."),
    ("cursor", "The <cursor> SVG element can be used to define a platform-independent custom cursor."),
    ("defs", "SVG allows graphical objects to be defined for later reuse."),
    ("desc", "Each container element or graphics element in an SVG drawing can supply a description string using the <desc> element where the description is text-only."),
    ("discard", "The <discard> SVG element allows authors to specify the time at which particular elements are to be discarded, thereby reducing the resources required by an SVG user agent."),
    ("ellipse", "The ellipse element is an SVG basic shape, used to create ellipses based on a center coordinate, and both their x and y radius."),
    ("feBlend", "The <feBlend> SVG filter primitive composes two objects together ruled by a certain blending mode."),
    ("feColorMatrix", "The <feColorMatrix> SVG filter element changes colors based on a transformation matrix."),
    ("feComponentTransfer", "Th <feComponentTransfer> SVG filter primitive performs color-component-wise remapping of data for each pixel."),
    ("feComposite", "This filter primitive performs the combination of two input images pixel-wise in image space using one of the Porter-Duff compositing operations: over, in, atop, out, xor and lighter."),
    ("feConvolveMatrix", "The <feConvolveMatrix> SVG filter primitive applies a matrix convolution filter effect."),
    ("feDiffuseLighting", "The <feDiffuseLighting> SVG filter primitive lights an image using the alpha channel as a bump map."),
    ("feDisplacementMap", "The <feDisplacementMap> SVG filter primitive uses the pixel values from the image from in2 to spatially displace the image from in."),
    ("feDistantLight", "The <feDistantLight> filter primitive defines a distant light source that can be used within a lighting filter primitive: <feDiffuseLighting> or <feSpecularLighting>."),
    ("feDropShadow", "The <feDropShadow> filter primitive creates a drop shadow of the input image."),
    ("feFlood", "The <feFlood> SVG filter primitive fills the filter subregion with the color and opacity defined by flood-color and flood-opacity."),
    ("feFuncA", "The <feFuncA> SVG filter primitive defines the transfer function for the alpha component of the input graphic of its parent <feComponentTransfer> element."),
    ("feFuncB", "The <feFuncB> SVG filter primitive defines the transfer function for the blue component of the input graphic of its parent <feComponentTransfer> element."),
    ("feFuncG", "The <feFuncG> SVG filter primitive defines the transfer function for the green component of the input graphic of its parent <feComponentTransfer> element."),
    ("feFuncR", "The <feFuncR> SVG filter primitive defines the transfer function for the red component of the input graphic of its parent <feComponentTransfer> element."),
    ("feGaussianBlur", "The <feGaussianBlur> SVG filter primitive blurs the input image by the amount specified in stdDeviation, which defines the bell-curve."),
    ("feImage", "The <feImage> SVG filter primitive fetches image data from an external source and provides the pixel data as output (meaning if the external source is an SVG image, it is rasterized.)"),
    ("feMerge", "The <feMerge> SVG element allows filter effects to be applied concurrently instead of sequentially."),
    ("feMergeNode", "The feMergeNode takes the result of another filter to be processed by its parent <feMerge>."),
    ("feMorphology", "The <feMorphology> SVG filter primitive is used to erode or dilate the input image."),
    ("feOffset", "The <feOffset> SVG filter primitive allows to offset the input image."),
    ("fePointLight", "The SVG filter primitive allows to create a point light effect."),
    ("feSpecularLighting", "The <feSpecularLighting> SVG filter primitive lights a source graphic using the alpha channel as a bump map."),
    ("feSpotLight", "The <feSpotLight> SVG filter primitive allows to create a spotlight effect."),
    ("feTile", "The <feTile> SVG filter primitive allows to fill a target rectangle with a repeated, tiled pattern of an input image."),
    ("feTurbulence", "The <feTurbulence> SVG filter primitive creates an image using the Perlin turbulence function."),
    ("filter", "The <filter> SVG element serves as container for atomic filter operations."),
    ("font", "The <font> SVG element defines a font to be used for text layout."),
    ("font-face", "The <font-face> SVG element corresponds to the CSS @font-face rule."),
    ("font-face-format", "The <font-face-format> SVG element describes the type of font referenced by its parent <font-face-uri>."),
    ("font-face-name", "The <font-face-name> element points to a locally installed copy of this font, identified by its name."),
    ("font-face-src", "The <font-face-src> SVG element corresponds to the src descriptor in CSS @font-face rules."),
    ("font-face-uri", "The <font-face-uri> SVG element points to a remote definition of the current font."),
    ("foreignObject", "The <foreignObject> SVG element allows for inclusion of a foreign XML namespace which has its graphical content drawn by a different user agent."),
    ("g", "The <g> SVG element is a container used to group other SVG elements."),
    ("glyph", "A <glyph> defines a single glyph in an SVG font."),
    ("glyphRef", "The glyphRef element provides a single possible glyph to the referencing <altGlyph> substitution."),
    ("hatch", "The <hatch> SVG element is used to fill or stroke an object using one or more pre-defined paths that are repeated at fixed intervals in a specified direction to cover the areas to be painted."),
    ("hatchpath", "The <hatchpath> SVG element defines a hatch path used by the <hatch> element."),
    ("hkern", "The <hkern> SVG element allows to fine-tweak the horizontal distance between two glyphs."),
    ("image", "The <image> SVG element allows a raster image to be included in an SVG document."),
    ("line", "The <line> element is an SVG basic shape used to create a line connecting two points."),
    ("linearGradient", "The <linearGradient> SVG element lets authors define linear gradients to fill or stroke graphical elements."),
    ("marker", "The <marker> element defines the graphics that is to be used for drawing arrowheads or polymarkers on a given <path>, <line>, <polyline> or <polygon> element."),
    ("mask", "In SVG, you can specify that any other graphics object or <g> element can be used as an alpha mask for compositing the current object into the background."),
    ("mesh", "The documentation about this has not yet been written; please consider contributing!"),
    ("meshgradient", "The documentation about this has not yet been written; please consider contributing!"),
    ("meshpatch", "The documentation about this has not yet been written; please consider contributing!"),
    ("meshrow", "The documentation about this has not yet been written; please consider contributing!"),
    ("metadata", "The <metadata> SVG element allows to add metadata to SVG content."),
    ("missing-glyph", "The <missing-glyph> SVG element's content is rendered, if for a given character the font doesn't define an appropriate <glyph>."),
    ("mpath", "The <mpath> sub-element for the <animateMotion> element provides the ability to reference an external <path> element as the definition of a motion path."),
    ("path", "The <path> SVG element is the generic element to define a shape."),
    ("pattern", "The <pattern> element defines a graphics object which can be redrawn at repeated x and y-coordinate intervals (\"tiled\") to cover an area."),
    ("polygon", "The <polygon> element defines a closed shape consisting of a set of connected straight line segments."),
    ("polyline", "The <polyline> SVG element is an SVG basic shape that creates straight lines connecting several points."),
    ("radialGradient", "The <radialGradient> SVG element lets authors define radial gradients to fill or stroke graphical elements."),
    ("rect", "The rect element is an SVG basic shape, used to create rectangles based on the position of a corner and their width and height."),
    ("script", "A SVG script element is equivalent to the script element in HTML and thus is the place for scripts (e.g., ECMAScript)."),
    ("set", "The <set> element provides a simple means of just setting the value of an attribute for a specified duration."),
    ("solidcolor", "The <solidColor> SVG element lets authors define a single color for use in multiple places in an SVG document."),
    ("stop", "The <stop> SVG element defines the ramp of colors to use on a gradient, which is a child element to either the <linearGradient> or the <radialGradient> element."),
    ("style", "The <style> SVG element allows style sheets to be embedded directly within SVG content."),
    ("svg", "The svg element can be used to embed an SVG fragment inside the current document (for example, an HTML document)."),
    ("switch", "The <switch> SVG element evaluates the requiredFeatures, requiredExtensions and systemLanguage attributes on its direct child elements in order, and then processes and renders the first child for which these attributes evaluate to true."),
    ("symbol", "The <symbol> element is used to define graphical template objects which can be instantiated by a <use> element."),
    ("text", "The SVG <text> element defines a graphics element consisting of text."),
    ("textPath", "In addition to text drawn in a straight line, SVG also includes the ability to place text along the shape of a <path> element."),
    ("title", "Each container element or graphics element in an SVG drawing can supply a <title> element containing a description string where the description is text-only."),
    ("tref", "The textual content for a <text> SVG element can be either character data directly embedded within the <text> element or the character data content of a referenced element, where the referencing is specified with a <tref> element."),
    ("tspan", "Within a <text> element, text and font properties and the current text position can be adjusted with absolute or relative coordinate values by including a <tspan> element."),
    ("unknown", "The documentation about this has not yet been written; please consider contributing!"),
    ("use", "The <use> element takes nodes from within the SVG document, and duplicates them somewhere else."),
    ("view", "A view is a defined way to view the image, like a zoom level or a detail view."),
    ("vkern", "The <vkern> SVG element allows to fine-tweak the vertical distance between two glyphs in top-to-bottom fonts."),
)

HTML_ELEMENTS = (
    ("a", "The HTML <a> element (or anchor element) creates a hyperlink to other web pages, files, locations within the same page, email addresses, or any other URL."),
    ("abbr", "The HTML <abbr> element represents an abbreviation and optionally provides a full description for it."),
    ("address", "The HTML <address> element supplies contact information for its nearest <article> or <body> ancestor; in the latter case, it applies to the whole document."),
    ("area", "The HTML <area> element defines a hot-spot region on an image, and optionally associates it with a hypertext link."),
    ("article", "The HTML <article> element represents a self-contained composition in a document, page, application, or site, which is intended to be independently distributable or reusable (e.g., in syndication)."),
    ("aside", "The HTML <aside> element represents a section of a document with content connected tangentially to the main content of the document (often presented as a sidebar)."),
    ("audio", "The HTML <audio> element is used to embed sound content in documents."),
    ("b", "The HTML <b> element represents a span of text stylistically different from normal text, without conveying any special importance or relevance, and that is typically rendered in boldface."),
    ("base", "The HTML <base> element specifies the base URL to use for all relative URLs contained within a document."),
    ("bdi", "The HTML <bdi> element (bidirectional isolation) isolates a span of text that might be formatted in a different direction from other text outside it."),
    ("bdo", "The HTML <bdo> element (bidirectional override) is used to override the current directionality of text."),
    ("blockquote", "The HTML <blockquote> Element (or HTML Block Quotation Element) indicates that the enclosed text is an extended quotation."),
    ("br", "The HTML <br> element produces a line break in text (carriage-return)."),
    ("button", "The HTML <button> element represents a clickable button."),
    ("canvas", "Use the HTML <canvas> element with the canvas scripting API to draw graphics and animations."),
    ("caption", "The HTML <caption> element represents the title of a table."),
    ("cite", "The HTML <cite> element represents a reference to a creative work."),
    ("code", "The HTML <code> element represents a fragment of computer code."),
    ("col", "The HTML <col> element defines a column within a table and is used for defining common semantics on all common cells."),
    ("colgroup", "The HTML <colgroup> element defines a group of columns within a table."),
    ("data", "The HTML <data> element links a given content with a machine-readable translation."),
    ("datalist", "The HTML <datalist> element contains a set of <option> elements that represent the values available for other controls."),
    ("dd", "The HTML <dd> element indicates the description of a term in a description list (<dl>)."),
    ("del", "The HTML <del> element represents a range of text that has been deleted from a document."),
    ("details", "The HTML <details> element is used as a disclosure widget from which the user can retrieve additional information."),
    ("dfn", "The HTML <dfn> element represents the defining instance of a term."),
    ("dialog", "The HTML <dialog> element represents a dialog box or other interactive component, such as an inspector or window."),
    ("div", "The HTML <div> element is the generic container for flow content and does not inherently represent anything."),
    ("dl", "The HTML <dl> element represents a description list."),
    ("dt", "The HTML <dt> element identifies a term in a description list."),
    ("em", "The HTML <em> element marks text that has stress emphasis."),
    ("embed", "The HTML <embed> element represents an integration point for an external application or interactive content (in other words, a plug-in)."),
    ("fieldset", "The HTML <fieldset> element is used to group several controls as well as labels (<label>) within a web form."),
    ("figcaption", "The HTML <figcaption> element represents a caption or a legend associated with a figure or an illustration described by the rest of the data of the <figure> element which is its immediate ancestor."),
    ("figure", "The HTML <figure> element represents self-contained content, frequently with a caption (<figcaption>), and is typically referenced as a single unit."),
    ("footer", "The HTML <footer> element represents a footer for its nearest sectioning content or sectioning root element."),
    ("form", "The HTML <form> element represents a document section that contains interactive controls to submit information to a web server."),
    ("h1", "The HTML <h1>–<h6> elements represent six levels of section headings."),
    ("h2", "The HTML <h1>–<h6> elements represent six levels of section headings."),
    ("h3", "The HTML <h1>–<h6> elements represent six levels of section headings."),
    ("h4", "The HTML <h1>–<h6> elements represent six levels of section headings."),
    ("h5", "The HTML <h1>–<h6> elements represent six levels of section headings."),
    ("h6", "The HTML <h1>–<h6> elements represent six levels of section headings."),
    ("header", "The HTML <header> element represents a group of introductory or navigational aids."),
    ("hgroup", "The HTML <hgroup> element represents a multi-level heading for a section of a document."),
    ("hr", "The HTML <hr> element represents a thematic break between paragraph-level elements (for example, a change of scene in a story, or a shift of topic with a section)."),
    ("i", "The HTML <i> element represents a range of text that is set off from the normal text for some reason, for example, technical terms, foreign language phrases, or fictional character thoughts."),
    ("iframe", "The HTML <iframe> element represents a nested browsing context, effectively embedding another HTML page into the current page."),
    ("img", "The HTML <img> element represents an image in the document."),
    ("input", "The HTML <input> element is used to create interactive controls for web-based forms in order to accept data from the user."),
    ("ins", "The HTML <ins> element represents a range of text that has been added to a document."),
    ("kbd", "The HTML <kbd> element represents user input and produces an inline element displayed in the browser's default monospace font."),
    ("label", "The HTML <label> element represents a caption for an item in a user interface."),
    ("legend", "The HTML <legend> element represents a caption for the content of its parent <fieldset>."),
    ("li", "The HTML <li> element is used to represent an item in a list."),
    ("link", "The HTML <link> element specifies relationships between the current document and an external resource."),
    ("main", "The HTML <main> element represents the main content of the <body> of a document or application."),
    ("map", "The HTML <map> element is used with <area> elements to define an image map (a clickable link area)."),
    ("mark", "The HTML <mark> element represents highlighted text, i.e., a run of text marked for reference purpose, due to its relevance in a particular context."),
    ("menu", "The HTML <menu> element represents a group of commands that a user can perform or activate."),
    ("menuitem", "The HTML <menuitem> element represents a command that a user is able to invoke through a popup menu."),
    ("meta", "The HTML <meta> element represents metadata that cannot be represented by other HTML meta-related elements, like <base>, <link>, <script>, <style> or <title>."),
    ("meter", "The HTML <meter> element represents either a scalar value within a known range or a fractional value."),
    ("nav", "The HTML <nav> element represents a section of a page that links to other pages or to parts within the page: a section with navigation links."),
    ("noframes", "<noframes> is an HTML element which is used to support browsers which are not able to support <frame> elements or configured to do so."),
    ("noscript", "The HTML <noscript> element defines a section of html to be inserted if a script type on the page is unsupported or if scripting is currently turned off in the browser."),
    ("object", "The HTML <object> element represents an external resource, which can be treated as an image, a nested browsing context, or a resource to be handled by a plugin."),
    ("ol", "The HTML <ol> element represents an ordered list of items, typically rendered as a numbered list."),
    ("optgroup", "The HTML <optgroup> element creates a grouping of options within a <select> element."),
    ("option", "The HTML <option> element is used to define an item contained in a <select>, an <optgroup>, or a <datalist> element."),
    ("output", "The HTML <output> element represents the result of a calculation or user action."),
    ("p", "The HTML <p> element represents a paragraph of text."),
    ("param", "The HTML <param> element defines parameters for an <object> element."),
    ("picture", "The HTML <picture> element is a container used to specify multiple <source> elements for a specific <img> contained in it."),
    ("pre", "The HTML <pre> element represents preformatted text."),
    ("progress", "The HTML <progress> element represents the completion progress of a task, typically displayed as a progress bar."),
    ("q", "The HTML <q> element indicates that the enclosed text is a short inline quotation."),
    ("rp", "The HTML <rp> element is used to provide fall-back parentheses for browsers that do not support display of ruby annotations using the <ruby> element."),
    ("rt", "The HTML <rt> element embraces pronunciation of characters presented in a ruby annotations, which are used to describe the pronunciation of East Asian characters."),
    ("rtc", "The HTML <rtc> element embraces semantic annotations of characters presented in a ruby of <rb> elements used inside of <ruby> element."),
    ("ruby", "The HTML <ruby> element represents a ruby annotation."),
    ("s", "The HTML <s> element renders text with a strikethrough, or a line through it."),
    ("samp", "The HTML <samp> element is an element intended to identify sample output from a computer program."),
    ("script", "The HTML <script> element is used to embed or reference an executable script."),
    ("section", "The HTML <section> element represents a standalone section of functionality contained within an HTML document, typically with a heading, which doesn't have a more specific semantic element to represent it."),
    ("select", "The HTML <select> element represents a control that provides a menu of options:"),
    ("slot", "The HTML <slot> element—part of the Web Components technology suite—is a placeholder inside a web component that you can fill with your own markup, which lets you create separate DOM trees and present them together."),
    ("small", "The HTML <small> element makes the text font size one size smaller (for example, from large to medium, or from small to x-small) down to the browser's minimum font size."),
    ("source", "The HTML <source> element specifies multiple media resources for either the <picture>, the <audio> or the <video> element."),
    ("span", "The HTML <span> element is a generic inline container for phrasing content, which does not inherently represent anything."),
    ("strong", "The HTML <strong> element gives text strong importance, and is typically displayed in bold."),
    ("style", "The HTML <style> element contains style information for a document, or part of a document."),
    ("sub", "The HTML <sub> element defines a span of text that should be displayed, for typographic reasons, lower, and often smaller, than the main span of text."),
    ("summary", "The HTML <summary> element is used as a summary, caption, or legend for the content of a <details> element."),
    ("sup", "The HTML <sup> element defines a span of text that should be displayed, for typographic reasons, higher, and often smaller, than the main span of text."),
    ("table", "The HTML <table> element represents tabular data — that is, information expressed via a two-dimensional data table."),
    ("tbody", "The HTML <tbody> element groups one or more <tr> elements as the body of a <table> element."),
    ("td", "The HTML <td> element defines a cell of a table that contains data."),
    ("template", "The HTML <template> element is a mechanism for holding client-side content that is not to be rendered when a page is loaded but may subsequently be instantiated during runtime using JavaScript."),
    ("textarea", "The HTML <textarea> element represents a multi-line plain-text editing control."),
    ("tfoot", "The HTML <tfoot> element defines a set of rows summarizing the columns of the table."),
    ("th", "The HTML <th> element defines a cell as header of a group of table cells."),
    ("thead", "The HTML <thead> element defines a set of rows defining the head of the columns of the table."),
    ("time", "The HTML <time> element represents either a time on a 24-hour clock or a precise date in the Gregorian calendar (with optional time and timezone information)."),
    ("title", "The HTML <title> element defines the title of the document, shown in a browser's title bar or on the page's tab."),
    ("tr", "The HTML <tr> element defines a row of cells in a table."),
    ("track", "The HTML <track> element is used as a child of the media elements <audio> and <video>."),
    ("u", "The HTML <u> element renders text with an underline, a line under the baseline of its content."),
    ("ul", "The HTML <ul> element represents an unordered list of items, typically rendered as a bulleted list."),
    ("var", "The HTML <var> element represents a variable in a mathematical expression or a programming context."),
    ("video", "Use the HTML <video> element to embed video content in a document."),
    ("wbr", "The HTML <wbr> element represents a word break opportunity—a position within text where the browser may optionally break a line, though its line-breaking rules would not otherwise create a break at that location."),
)

