# postcart

`postcart` turns the text of an inbound e-mail into a postcard request. It
reads the options a sender writes at the top of a message, fills in anything
left out, draws both sides of the postcard as ASCII art, keeps counters, block
lists and queued jobs in small JSON files, and builds the delivery e-mail that
carries a finished card.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Writing a postcard e-mail

The body starts with option lines of the form `key: value`. Blank lines are
skipped, and the first non-blank line that is not an option begins the message.

```
To: Grandma <grandma@example.com>
From: Arthur <arthur@example.com>
Artwork: city
Style: painting
Border: stripes
Shape: classic
Font: marker
Textured: yes
Country: PC
It was good visiting you in the city the other day.
```

- `To:` is required; without it `parse_email_body` raises `ParseError`.
- `From:` is needed too. If it is missing, the `fallback_sender` passed to
  `parse_email_body` is used; with no fallback, `MissingFromError` is raised
  and its `params` attribute holds everything else that was read. A `From:`
  that is empty or contains "anon" signs the card as `Anonymous`.
- People may be written as `Name <address>`, a bare address, or a bare name.
- Option values are matched by edit distance against the known names, up to a
  distance of 2, so small typos such as `moutains` still pick the right choice.
  Anything further off leaves the option unset.
- `Country:` is kept as written unless a `country_resolver` callable is passed
  to `parse_email_body` to turn it into a country code.

## Library use

### Options and defaults

`postcart.options` holds the enums `Artwork`, `Style`, `Font`, `Border`,
`StampShape` and `Textured`, each with an `UNKNOWN` member for "not chosen".
It also gives `font_description(font)`, `stamp_shape_path(shape)` and
`stamp_padding(shape)`.

`postcart.models` holds `Person`, `EmailAttachment` and `Params`.
`assign_unknown_values(params, allow_attachments, rng)` fills every unset option
with a random choice, and also replaces `Artwork.ATTACHMENT` when attachments
are not allowed. Pass a `random.Random` as `rng` for repeatable choices.

### ASCII postcards

`postcart.ascii`:

- `create_front_ascii(params)` draws the writing side: sender and message on
  the left, a text stamp with the country code and the recipient on the right,
  followed by the full message wrapped at 39 characters.
- `create_back_ascii(artwork, border)` centres the artwork's picture in a
  40 by 15 frame drawn with the chosen border.
- Lower-level helpers: `border_for`, `back_artwork_ascii`, `add_ascii_to_frame`,
  `create_ascii_stamp`, `content_lines`, `person_ascii` and `breakup_message`.

### Text for the image version

`postcart.text.front_text_items(params)` lists the `TextItem`s to draw on the
writing side of a card image, each with its font description, `TextBox` and
colour. The message has angle brackets replaced by `sanitize_message` and words
longer than 20 characters hyphenated by `message_breakup`.

### Artwork

`postcart.artwork`:

- `validate_content_type` accepts JPEG, PNG and WebP attachments only.
- `decode_attachment` returns the image bytes of an attachment whose content is
  unpadded standard base64.
- `placeholder_path` names the stock picture for an artwork choice.
- `create_prompt` writes the image-generation prompt for a scene and style.

Problems raise `ArtworkError`.

### Storage

`postcart.store.Store(data_dir)` keeps recipients, senders, blocked senders,
statistics and queued `JobRecord`s as JSON files in `data_dir`, with queued
jobs' attachments under `data_dir/attachments`. Use it as a context manager,
or call `load()` and `close()` yourself; `close()` writes every table back,
while `record_queued_job` saves the queue file at once. File problems raise
`StoreError`.

`Params.to_job_record()` and `Params.from_job_record(record, store)` move a job
in and out of the store.

### Delivery e-mail

`postcart.delivery`:

- `build_email(params, image_url, ascii_text, email_domain)` assembles the
  templated message for a finished card, with a subject from `build_subject`.
- `deliveries_template()` describes the template the message is sent with.
- `needs_deliveries_template(templates)` tells whether a list of existing
  templates lacks it.

## What this package does not do

- It does not draw the postcard image; it only says which pictures, stamp
  files and text boxes one would use.
- It does not send e-mail, receive inbound e-mail, or talk to any mail service;
  `build_email` and `deliveries_template` return plain dictionaries.
- It has no web server, no command-line program, and no worker queue that
  processes jobs; `Store` only records them.
- It does not generate artwork; `create_prompt` only writes the prompt.